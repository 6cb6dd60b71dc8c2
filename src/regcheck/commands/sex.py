"""Command: check a sex code."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regcheck.commands._base import RegCommand

if TYPE_CHECKING:
    from regcheck.commands._context import AppContext


@click.command(
    cls=RegCommand,
    examples="""\
  regcheck sex M
  regcheck -q sex x""",
)
@click.argument("value")
@click.pass_obj
def sex(app: AppContext, value: str) -> None:
    """Check that VALUE is one of the configured sex codes."""
    app.emit(app.service.check_sex(value))
