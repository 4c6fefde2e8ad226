"""Fluent compound-selector builder.

A builder accumulates fragments in call order and renders them on demand::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
    # -> a[href$=".png"]:focus

Builders are created through :mod:`selectorkit.facade`, never directly.
"""

from __future__ import annotations

import logging

from selectorkit.model.fragment import Fragment, Stage
from selectorkit.stages import StagePointer

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """A compound selector under construction, or a combined selector.

    A builder seeded with a fragment collects further fragments through the
    chaining methods below. A builder produced by :meth:`_combined` holds a
    pre-rendered composite string and accepts no further fragments.
    """

    def __init__(self, pointer: StagePointer, fragments: list[Fragment], composite: str | None = None) -> None:
        self._pointer = pointer
        self._fragments = fragments
        self._composite = composite

    @classmethod
    def _seeded(cls, stage: Stage, value: str) -> SelectorBuilder:
        fragment = Fragment(stage=stage, value=value)
        logger.debug("Seeded selector with %s fragment %r", stage.value, fragment.text)
        return cls(StagePointer.for_seed(stage), [fragment])

    @classmethod
    def _combined(cls, left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
        # Both sides are rendered now so later changes to them don't leak in.
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector %r", text)
        pointer = StagePointer()
        pointer.close()
        return cls(pointer, [], composite=text)

    # --- state -----------------------------------------------------------

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def is_composite(self) -> bool:
        return self._composite is not None

    def allowed_stages(self) -> frozenset[Stage]:
        return self._pointer.allowed()

    # --- fragments -------------------------------------------------------

    def _append(self, stage: Stage, value: str) -> SelectorBuilder:
        """Append a fragment of *stage* and return this builder.

        Raises:
            DuplicateSingletonError: *stage* is a singleton stage already used.
            OrderViolationError: *stage* comes before a stage already reached,
                or the builder is a combined selector.
        """
        self._pointer.advance(stage)
        fragment = Fragment(stage=stage, value=value)
        self._fragments.append(fragment)
        logger.debug("Appended %s fragment %r", stage.value, fragment.text)
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Stage.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Stage.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Stage.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(Stage.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Stage.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Stage.PSEUDO_ELEMENT, value)

    attribute = attr
    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    # --- rendering -------------------------------------------------------

    def stringify(self) -> str:
        if self._composite is not None:
            return self._composite
        return "".join(fragment.text for fragment in self._fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
