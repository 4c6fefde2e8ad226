"""Selectorkit model layer -- public type re-exports."""

from selectorkit.model.fragment import Fragment, Stage

__all__ = [
    "Stage",
    "Fragment",
]
