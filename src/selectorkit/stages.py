"""Stage pointer: the ordering state machine behind the selector builder.

The pointer only ever moves forward through the stage list. Repeatable
stages (class, attribute, pseudo-class) accept further fragments while the
pointer rests on them; singleton stages are consumed by their first fragment.
"""

from __future__ import annotations

from selectorkit.errors import DuplicateSingletonError, OrderViolationError
from selectorkit.model.fragment import Stage

__all__ = ["StagePointer"]


class StagePointer:
    """Monotonic pointer into the ordered stage list."""

    def __init__(self, start: Stage = Stage.ELEMENT) -> None:
        self._current = start
        self._seen: set[Stage] = set()
        self._closed = False

    @classmethod
    def for_seed(cls, stage: Stage) -> StagePointer:
        """Return a pointer that has already consumed one fragment of *stage*."""
        pointer = cls(stage)
        pointer.advance(stage)
        return pointer

    @property
    def current(self) -> Stage:
        return self._current

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Reject every further stage (used for combined selectors)."""
        self._closed = True

    def check(self, stage: Stage) -> None:
        """Raise if a fragment of *stage* may not be appended next."""
        if stage.is_singleton and stage in self._seen:
            raise DuplicateSingletonError(stage)
        if self._closed or stage.position < self._current.position:
            raise OrderViolationError(stage)

    def accepts(self, stage: Stage) -> bool:
        try:
            self.check(stage)
        except (DuplicateSingletonError, OrderViolationError):
            return False
        return True

    def allowed(self) -> frozenset[Stage]:
        """Stages a next fragment may use."""
        return frozenset(stage for stage in Stage if self.accepts(stage))

    def advance(self, stage: Stage) -> None:
        """Validate *stage* and move the pointer onto it.

        The pointer is left untouched when validation fails.
        """
        self.check(stage)
        self._current = stage
        if stage.is_singleton:
            self._seen.add(stage)

    def __repr__(self) -> str:
        return f"StagePointer(current={self._current.value!r}, closed={self._closed})"
