"""Selector builder error types.

Both errors signal a misuse of the builder (an invalid call sequence), not a
problem with the values passed in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.fragment import Stage

DUPLICATE_SINGLETON_MESSAGE = "element, id and pseudo-element may occur at most once"
ORDER_VIOLATION_MESSAGE = (
    "selector fragments must appear in the order element, id, class, "
    "attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base class for invalid selector construction sequences."""

    def __init__(self, message: str, stage: Stage | None = None) -> None:
        self.stage = stage
        super().__init__(message)


class DuplicateSingletonError(SelectorError):
    """Raised when element, id or pseudo-element is supplied twice."""

    def __init__(self, stage: Stage | None = None) -> None:
        super().__init__(DUPLICATE_SINGLETON_MESSAGE, stage)


class OrderViolationError(SelectorError):
    """Raised when a fragment is supplied after a later stage was reached."""

    def __init__(self, stage: Stage | None = None) -> None:
        super().__init__(ORDER_VIOLATION_MESSAGE, stage)
