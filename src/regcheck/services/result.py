"""ServiceResult and ServiceError: what every check hands back.

A valid field is ``ok=True`` with the checked value in ``data``.  An
invalid field is ``ok=False`` with a coded :class:`ServiceError`; the
predicates themselves never raise, so neither does a check.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float)):
        return value
    return str(value)


class ServiceError(BaseModel):
    """Why a field failed: a stable ``code`` plus a user-facing ``message``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one field check.

    Attributes:
        ok: Whether the checked value is valid.
        op: Name of the check (``"check_name"``, ``"check_age"``, ``"check_sex"``).
        data: Field name, checked value, and parse output on success.
        warnings: Accepted-with-caveats notes (e.g. ignored trailing text).
        error: Structured error if ``ok`` is False.
        meta: Rule options that were in force.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def valid(
        cls,
        op: str,
        field: str,
        value: Any,
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
        **extra: Any,
    ) -> ServiceResult:
        """Build a passing result; *extra* lands in ``data`` next to the value."""
        data = {"field": field, "value": _jsonable(value), **extra, "valid": True}
        return cls(ok=True, op=op, data=data, warnings=warnings or [], meta=meta)

    @classmethod
    def invalid(
        cls,
        op: str,
        field: str,
        value: Any,
        *,
        code: str,
        message: str,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build a failing result carrying the offending value in ``error.detail``."""
        error = ServiceError(
            code=code,
            message=message,
            detail={"field": field, "value": _jsonable(value)},
        )
        return cls(ok=False, op=op, error=error, meta=meta)
