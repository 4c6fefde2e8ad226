"""CLI commands: selectorkit build / combine -- render selectors from tokens."""

from __future__ import annotations

import logging
import re

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.config import COMBINATORS, SelectorkitConfig
from selectorkit.errors import SelectorError
from selectorkit.facade import css_selector_builder
from selectorkit.model.fragment import Stage

logger = logging.getLogger(__name__)

TOKEN_KINDS: dict[str, Stage] = {
    "element": Stage.ELEMENT,
    "id": Stage.ID,
    "class": Stage.CLASS,
    "attr": Stage.ATTRIBUTE,
    "attribute": Stage.ATTRIBUTE,
    "pseudo-class": Stage.PSEUDO_CLASS,
    "pseudo-element": Stage.PSEUDO_ELEMENT,
}

# Facade and builder share these method names.
STAGE_METHODS: dict[Stage, str] = {
    Stage.ELEMENT: "element",
    Stage.ID: "id",
    Stage.CLASS: "class_",
    Stage.ATTRIBUTE: "attr",
    Stage.PSEUDO_CLASS: "pseudo_class",
    Stage.PSEUDO_ELEMENT: "pseudo_element",
}

# A comma only separates tokens when a new kind= follows it, so attribute
# values such as title="x,y" stay intact.
_TOKEN_SEPARATOR_RE = re.compile(
    r",(?=\s*(?:{})=)".format(
        "|".join(re.escape(kind) for kind in sorted(TOKEN_KINDS, key=len, reverse=True))
    ),
    re.IGNORECASE,
)


def parse_token(token: str) -> tuple[Stage, str]:
    """Split a ``kind=value`` token; only the first ``=`` separates."""
    kind, sep, value = token.partition("=")
    stage = TOKEN_KINDS.get(kind.strip().lower())
    if not sep or stage is None:
        known = ", ".join(TOKEN_KINDS)
        raise click.BadParameter(f"{token!r} is not kind=value with kind one of: {known}")
    return stage, value


def build_from_tokens(tokens: list[str]) -> SelectorBuilder:
    """Apply *tokens* in order, seeding the builder with the first one."""
    if not tokens:
        raise click.BadParameter("at least one kind=value token is required")
    parsed = [parse_token(token) for token in tokens]
    stage, value = parsed[0]
    try:
        builder = getattr(css_selector_builder, STAGE_METHODS[stage])(value)
        for stage, value in parsed[1:]:
            getattr(builder, STAGE_METHODS[stage])(value)
    except SelectorError as exc:
        raise click.ClickException(f"{exc} (offending fragment: {stage.value}={value})") from exc
    return builder


def split_side(side: str) -> list[str]:
    """Split a comma-separated token list at commas that start a new token."""
    return [token.strip() for token in _TOKEN_SEPARATOR_RE.split(side) if token.strip()]


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a compound selector from kind=value TOKENS.

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.
    Example: selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    builder = build_from_tokens(list(tokens))
    click.echo(builder.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
@click.option("--strict/--no-strict", default=None, help="Only accept ' ', '>', '+' and '~' as combinators")
@click.pass_obj
def combine(config: SelectorkitConfig | None, left: str, combinator: str, right: str, strict: bool | None) -> None:
    """Combine two compound selectors with COMBINATOR.

    LEFT and RIGHT are comma-separated token lists, e.g. element=div,id=main.
    Commas inside a value (attr=title="x,y") are kept.
    """
    config = config or SelectorkitConfig()
    if strict is None:
        strict = config.strict_combinators
    if strict and combinator not in COMBINATORS:
        raise click.BadParameter(f"{combinator!r} is not a CSS combinator", param_hint="COMBINATOR")

    logger.debug("Combining %r %r %r", left, combinator, right)
    result = css_selector_builder.combine(
        build_from_tokens(split_side(left)),
        combinator,
        build_from_tokens(split_side(right)),
    )
    click.echo(result.stringify())
