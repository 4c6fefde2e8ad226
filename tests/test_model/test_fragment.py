"""Tests for the Stage enum and Fragment dataclass."""

import pytest

from selectorkit.model import Fragment, Stage


class TestStage:
    def test_order(self):
        assert [s.value for s in Stage] == [
            "element",
            "id",
            "class",
            "attribute",
            "pseudo-class",
            "pseudo-element",
        ]

    def test_positions(self):
        assert Stage.ELEMENT.position == 0
        assert Stage.PSEUDO_ELEMENT.position == 5

    def test_singletons(self):
        singletons = {s for s in Stage if s.is_singleton}
        assert singletons == {Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT}


class TestFragmentText:
    @pytest.mark.parametrize(
        "stage, value, expected",
        [
            (Stage.ELEMENT, "a", "a"),
            (Stage.ID, "main", "#main"),
            (Stage.CLASS, "container", ".container"),
            (Stage.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
            (Stage.PSEUDO_CLASS, "nth-of-type(even)", ":nth-of-type(even)"),
            (Stage.PSEUDO_ELEMENT, "before", "::before"),
        ],
    )
    def test_render(self, stage, value, expected):
        assert Fragment(stage=stage, value=value).text == expected

    def test_str(self):
        assert str(Fragment(stage=Stage.ID, value="x")) == "#x"

    def test_frozen(self):
        fragment = Fragment(stage=Stage.CLASS, value="x")
        with pytest.raises(AttributeError):
            fragment.value = "y"  # type: ignore[misc]

    def test_equality(self):
        assert Fragment(Stage.CLASS, "x") == Fragment(Stage.CLASS, "x")
        assert Fragment(Stage.CLASS, "x") != Fragment(Stage.ID, "x")
