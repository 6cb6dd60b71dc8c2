"""AppContext: per-invocation state shared by every subcommand.

The root group builds one from :class:`RegSettings` and stores it as
``ctx.obj``; subcommands receive it with ``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regcheck.config.logging import configure_logging
from regcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from regcheck.config.settings import RegSettings
    from regcheck.services.result import ServiceResult
    from regcheck.services.validation import ValidationService


class AppContext:
    def __init__(self, settings: RegSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._service: ValidationService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ValidationService:
        """ValidationService bound to these settings, built on first use."""
        if self._service is None:
            from regcheck.services.validation import ValidationService

            self._service = ValidationService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 when the value was invalid.

        Valid results go to stdout, invalid ones to stderr.  Warnings on a
        valid result follow on stderr in the default mode only: JSON
        already carries them and quiet mode drops them.
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
        if self.output.json_output or self.output.quiet:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
