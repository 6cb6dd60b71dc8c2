"""Human-name character rules.

A valid name is one or more ASCII letters, whitespace characters,
apostrophes, or hyphens, and nothing else.
"""

from __future__ import annotations

import re

NAME_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z\s'-]+")


def validate_name(name: str, *, max_length: int | None = None) -> bool:
    """Check whether *name* consists solely of permitted name characters.

    The pattern must cover the whole string, so ``""`` is invalid.
    Non-text input is invalid rather than an error.

    Examples:
        >>> validate_name("O'Brien-Smith")
        True
        >>> validate_name("Jane_Doe")
        False
        >>> validate_name("")
        False
    """
    if not isinstance(name, str):
        return False
    if max_length is not None and len(name) > max_length:
        return False
    return NAME_PATTERN.fullmatch(name) is not None
