"""Command: check a patient age."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regcheck.commands._base import RegCommand

if TYPE_CHECKING:
    from regcheck.commands._context import AppContext


@click.command(
    cls=RegCommand,
    examples="""\
  regcheck age 42
  regcheck age 42abc
  regcheck age 42abc --mode strict
  regcheck --json age -- -1""",
)
@click.argument("value")
@click.option(
    "--mode",
    type=click.Choice(["strict", "permissive"]),
    default=None,
    help="Parsing mode. strict requires the whole value to be an integer (default: from config).",
)
@click.pass_obj
def age(app: AppContext, value: str, mode: str | None) -> None:
    """Check that VALUE reads as an age within the configured range."""
    strict = None if mode is None else mode == "strict"
    app.emit(app.service.check_age(value, strict=strict))
