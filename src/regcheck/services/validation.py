"""ValidationService: configured predicates with structured results.

The domain predicates answer only True/False.  This service applies the
options from :class:`RegSettings`, and turns each answer into a
:class:`ServiceResult` that the CLI (or any other caller) can render.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from regcheck.domain.ages import parse_leading_int, parse_whole_int, validate_age
from regcheck.domain.names import validate_name
from regcheck.domain.sex import validate_sex
from regcheck.services.result import ServiceResult

if TYPE_CHECKING:
    from regcheck.config.settings import RegSettings

logger = logging.getLogger(__name__)

NAME_MESSAGE = (
    "Name contains invalid characters. "
    "Only letters, spaces, apostrophes, and hyphens are allowed."
)


class ValidationService:
    """Run the registration-field checks with configured options.

    Usage::

        svc = ValidationService(settings)
        result = svc.check_age("42")
        if not result.ok:
            print(result.error.message)
    """

    def __init__(self, settings: RegSettings | None = None) -> None:
        if settings is None:
            from regcheck.config.settings import RegSettings

            settings = RegSettings()
        self._settings = settings

    def check_name(self, value: Any) -> ServiceResult:
        """Validate a patient name."""
        max_length = self._settings.name.max_length
        valid = validate_name(value, max_length=max_length)
        logger.debug("check_name valid=%s max_length=%s", valid, max_length)

        if valid:
            return ServiceResult.valid("check_name", "name", value)

        message = NAME_MESSAGE
        if isinstance(value, str) and max_length is not None and len(value) > max_length:
            message = f"Name must be at most {max_length} characters"
        elif value is None or value == "":
            message = "Name is required"
        return ServiceResult.invalid(
            "check_name", "name", value, code="INVALID_NAME", message=message
        )

    def check_age(self, value: Any, *, strict: bool | None = None) -> ServiceResult:
        """Validate a patient age.

        Args:
            value: Text or number to check.
            strict: Override the configured parsing mode. None keeps config.
        """
        cfg = self._settings.age
        use_strict = cfg.strict if strict is None else strict
        valid = validate_age(
            value,
            min_age=cfg.min_age,
            max_age=cfg.max_age,
            strict=use_strict,
        )
        logger.debug("check_age valid=%s strict=%s", valid, use_strict)
        meta = {"min_age": cfg.min_age, "max_age": cfg.max_age, "strict": use_strict}

        if not valid:
            message = f"Please enter a valid age between {cfg.min_age} and {cfg.max_age}"
            return ServiceResult.invalid(
                "check_age", "age", value, code="INVALID_AGE", message=message, meta=meta
            )

        parsed = parse_leading_int(value)
        warnings: list[str] = []
        if not use_strict and parse_whole_int(value) is None:
            warnings.append(f"Trailing content ignored: {str(value)!r} read as {parsed}")
        return ServiceResult.valid(
            "check_age", "age", value, parsed=parsed, warnings=warnings, meta=meta
        )

    def check_sex(self, value: Any) -> ServiceResult:
        """Validate a sex code."""
        codes = self._settings.sex.codes
        valid = validate_sex(value, codes=codes)
        logger.debug("check_sex valid=%s", valid)

        if valid:
            return ServiceResult.valid("check_sex", "sex", value)
        message = f"Invalid selection for sex (expected one of: {', '.join(codes)})"
        return ServiceResult.invalid(
            "check_sex", "sex", value, code="INVALID_SEX", message=message
        )

