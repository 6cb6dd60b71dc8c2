"""regcheck subcommands, one module per registration field."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach ``name``, ``age`` and ``sex`` to *cli* (imported here, not at module load)."""
    from regcheck.commands.age import age
    from regcheck.commands.name import name
    from regcheck.commands.sex import sex

    for command in (name, age, sex):
        cli.add_command(command)
