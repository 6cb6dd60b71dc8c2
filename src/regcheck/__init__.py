"""regcheck: patient-registration input validators.

The predicates are importable straight from the package root::

    from regcheck import validate_age, validate_name

    validate_name("O'Brien-Smith")  # True
    validate_age("42abc")           # True (leading-integer parse)
"""

from __future__ import annotations

from regcheck.domain.ages import parse_leading_int, validate_age
from regcheck.domain.names import validate_name
from regcheck.domain.sex import validate_sex

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse_leading_int",
    "validate_age",
    "validate_name",
    "validate_sex",
]
