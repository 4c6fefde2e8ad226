"""Facade for creating selector builders.

Every method returns a new :class:`~selectorkit.builder.SelectorBuilder`::

    from selectorkit import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # -> #main.container.editable

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("p").pseudo_class("first-child"),
    ).stringify()
    # -> div#main + p:first-child
"""

from __future__ import annotations

from selectorkit.builder import SelectorBuilder
from selectorkit.model.fragment import Stage

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Entry point exposing one constructor per fragment kind plus combine."""

    def _start(self, stage: Stage, value: str) -> SelectorBuilder:
        """Create a builder seeded with a single fragment of *stage*."""
        return SelectorBuilder._seeded(stage, value)

    def element(self, value: str) -> SelectorBuilder:
        return self._start(Stage.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._start(Stage.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._start(Stage.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._start(Stage.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._start(Stage.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._start(Stage.PSEUDO_ELEMENT, value)

    attribute = attr
    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def combine(self, left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
        """Join two selectors as ``left combinator right``.

        The combinator is used as given (``" "``, ``">"``, ``"+"``, ``"~"``
        or anything else). Either side may itself be a combined selector.
        """
        return SelectorBuilder._combined(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
