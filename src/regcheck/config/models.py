"""Pydantic configuration models with code-baked defaults.

One frozen model per regcheck.toml section.  Defaults reproduce the
built-in rules, so an empty (or missing) file changes nothing.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from regcheck.domain.ages import MAX_AGE, MIN_AGE
from regcheck.domain.sex import SEX_CODES

# --- regcheck.toml sections ---


class NameConfig(BaseModel):
    """[name] section."""

    model_config = {"frozen": True}

    max_length: int | None = Field(default=None, ge=1)


class AgeConfig(BaseModel):
    """[age] section."""

    model_config = {"frozen": True}

    min_age: int = MIN_AGE
    max_age: int = MAX_AGE
    strict: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> AgeConfig:
        if self.min_age > self.max_age:
            msg = f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            raise ValueError(msg)
        return self


class SexConfig(BaseModel):
    """[sex] section."""

    model_config = {"frozen": True}

    codes: tuple[str, ...] = Field(default=SEX_CODES, min_length=1)
