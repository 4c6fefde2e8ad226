"""Selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import dataclasses
import logging

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Selectorkit - build CSS selectors from ordered fragments."""
    config = SelectorkitConfig.from_env()
    level = (log_level or config.log_level).upper()
    if level not in LOG_LEVELS:
        raise click.BadParameter(
            f"{level!r} is not one of {', '.join(LOG_LEVELS)}",
            param_hint="SELECTORKIT_LOG_LEVEL",
        )
    logging.basicConfig(level=level)
    logging.getLogger("selectorkit").setLevel(level)
    ctx.obj = dataclasses.replace(config, log_level=level)


# Import and register subcommands
from selectorkit.cli.build import build, combine  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
