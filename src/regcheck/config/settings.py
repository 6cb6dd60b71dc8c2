"""RegSettings: one frozen object for everything that tunes a check.

Sources, highest priority first: keyword arguments (the CLI flags),
``REGCHECK_*`` environment variables, the applicable ``regcheck.toml``,
then the defaults baked into :mod:`regcheck.config.models`.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from regcheck.config.discovery import find_config
from regcheck.config.models import AgeConfig, NameConfig, SexConfig

# TOML file for the settings object currently being built; set by from_cli().
_toml_file: ContextVar[Path | None] = ContextVar("regcheck_toml_file", default=None)


class RegSettings(BaseSettings):
    model_config = {
        "frozen": True,
        "env_prefix": "REGCHECK_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    name: NameConfig = Field(default_factory=NameConfig)
    age: AgeConfig = Field(default_factory=AgeConfig)
    sex: SexConfig = Field(default_factory=SexConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No dotenv or secrets directory: regcheck.toml is the only file source.
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> RegSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* must name an existing file; otherwise the
        file is discovered from *start*.  Raises :class:`click.BadParameter`
        for a missing explicit file and :class:`click.ClickException` for
        TOML that does not parse.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.BadParameter(
                    f"{config_path} does not exist or is not a file.",
                    param_hint="'-c' / '--config'",
                )
        else:
            toml_path = find_config(start)

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_file.reset(token)
