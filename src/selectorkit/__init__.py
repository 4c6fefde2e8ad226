"""Selectorkit: fluent CSS selector builder and small object helpers."""

from selectorkit.config import COMBINATORS, SelectorkitConfig
from selectorkit.errors import DuplicateSingletonError, OrderViolationError, SelectorError
from selectorkit.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.model import Fragment, Stage
from selectorkit.objects import Rectangle
from selectorkit.serialization import from_json, get_json
from selectorkit.stages import StagePointer

__version__ = "0.1.0"

__all__ = [
    # builder
    "css_selector_builder",
    "CssSelectorBuilder",
    "StagePointer",
    # model
    "Stage",
    "Fragment",
    # errors
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    # config
    "SelectorkitConfig",
    "COMBINATORS",
    # objects
    "Rectangle",
    "get_json",
    "from_json",
]
