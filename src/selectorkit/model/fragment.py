"""Fragment model: the Stage enum and the rendered Fragment dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Stage(Enum):
    """The ordered categories a selector fragment can belong to.

    Members are declared in the order they must appear in a compound
    selector: ``element#id.class[attr]:pseudo-class::pseudo-element``.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def position(self) -> int:
        return list(Stage).index(self)

    @property
    def is_singleton(self) -> bool:
        """Element, id and pseudo-element may occur at most once."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLETONS = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})

_AFFIXES: dict[Stage, tuple[str, str]] = {
    Stage.ELEMENT: ("", ""),
    Stage.ID: ("#", ""),
    Stage.CLASS: (".", ""),
    Stage.ATTRIBUTE: ("[", "]"),
    Stage.PSEUDO_CLASS: (":", ""),
    Stage.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """One rendered piece of a compound selector, e.g. ``#main`` or ``.box``.

    Attributes:
        stage: The stage the fragment belongs to.
        value: The raw value as given by the caller. Attribute values are
            bracket-free expressions such as ``href$=".png"`` and are not
            escaped or validated.
    """

    stage: Stage
    value: str

    @property
    def text(self) -> str:
        return self.stage.render(self.value)

    def __str__(self) -> str:
        return self.text
