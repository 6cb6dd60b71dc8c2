"""Command: check a patient name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regcheck.commands._base import RegCommand

if TYPE_CHECKING:
    from regcheck.commands._context import AppContext


@click.command(
    cls=RegCommand,
    examples="""\
  regcheck name "Mary Jane"
  regcheck name "O'Brien-Smith"
  regcheck --json name John123""",
)
@click.argument("value")
@click.pass_obj
def name(app: AppContext, value: str) -> None:
    """Check that VALUE holds only letters, spaces, apostrophes, and hyphens."""
    app.emit(app.service.check_name(value))
