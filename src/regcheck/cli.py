"""The ``regcheck`` command: global flags on a group, one subcommand per field."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from regcheck import __version__
from regcheck.commands import register_commands
from regcheck.commands._context import AppContext
from regcheck.config.settings import RegSettings


def _load_settings(**options: Any) -> RegSettings:
    # A rule that fails validation (e.g. min_age > max_age) is the user's input.
    try:
        return RegSettings.from_cli(**options)
    except ValidationError as exc:
        raise click.UsageError(f"Invalid configuration: {exc}") from exc


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="regcheck")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR lines.")
@click.option("-v", "--verbose", is_flag=True, help="Show error detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Use this regcheck.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, **flags: bool) -> None:
    """regcheck: validate patient-registration fields (name, age, sex)."""
    ctx.obj = AppContext(_load_settings(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
