"""Age parsing and range rules.

Two parsing modes:
- Permissive (default): leading-integer parse. ``"42abc"`` reads as 42.
- Strict: the whole value must be an integer. ``"42abc"`` is rejected.

Numbers are taken as numbers: ints as-is, floats truncated toward zero.
Only other values go through their text form.

INVARIANT: a value that yields no number is never inside the valid range.
INVARIANT: parsing never raises, however long the digit run.
"""

from __future__ import annotations

import math
import re
from typing import Any

MIN_AGE = 0
MAX_AGE = 120

# Digit runs longer than this are clamped; no age bound comes near it.
MAX_DIGITS = 18

_LEADING_INT = re.compile(r"([+-]?)0*([0-9]+)")
_WHOLE_INT = re.compile(r"\s*([+-]?)0*([0-9]+)\s*")


def _digits_to_int(sign: str, digits: str) -> int:
    if len(digits) > MAX_DIGITS:
        magnitude = 10**MAX_DIGITS
    else:
        magnitude = int(digits)
    return -magnitude if sign == "-" else magnitude


def parse_leading_int(value: Any) -> int | None:
    """Extract a base-10 integer from the start of *value*.

    Text: leading whitespace and one optional sign are accepted, and
    everything after the last leading digit is ignored.  Runs of more
    than :data:`MAX_DIGITS` significant digits clamp to ``±10**MAX_DIGITS``.
    Returns None when no digits are found.

    Examples:
        >>> parse_leading_int("42abc")
        42
        >>> parse_leading_int("  -3 years")
        -3
        >>> parse_leading_int(42.9)
        42
        >>> parse_leading_int("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value).lstrip())
    if match is None:
        return None
    return _digits_to_int(match.group(1), match.group(2))


def parse_whole_int(value: Any) -> int | None:
    """Strict counterpart of :func:`parse_leading_int`.

    None unless *value* is wholly an integer: an int, an integral float,
    or text holding only a signed digit run and surrounding whitespace.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    match = _WHOLE_INT.fullmatch(str(value))
    if match is None:
        return None
    return _digits_to_int(match.group(1), match.group(2))


def validate_age(
    age: str | int | float,
    *,
    min_age: int = MIN_AGE,
    max_age: int = MAX_AGE,
    strict: bool = False,
) -> bool:
    """Check whether *age* parses to an integer in ``[min_age, max_age]``.

    Args:
        age: Text or number, typically straight from a form field.
        min_age: Inclusive lower bound.
        max_age: Inclusive upper bound.
        strict: Reject values that are not wholly an integer.
    """
    parsed = parse_whole_int(age) if strict else parse_leading_int(age)
    if parsed is None:
        return False
    return min_age <= parsed <= max_age
