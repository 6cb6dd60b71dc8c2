"""Sex code rules for patient profiles."""

from __future__ import annotations

from collections.abc import Collection

SEX_CODES: tuple[str, ...] = ("M", "F", "O")


def validate_sex(value: str, *, codes: Collection[str] = SEX_CODES) -> bool:
    """Check whether *value* is exactly one of *codes* (case-sensitive)."""
    if not isinstance(value, str):
        return False
    return value in codes
