"""ServiceResult and ServiceError — the contract between core and interfaces.

INVARIANT: All service-layer methods return ServiceResult. Core errors
never escape a service method; they become ``ok=False`` results carrying
the error's stable code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pubky_app_specs.domain.errors import FieldValidationError, SpecsError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: SpecsError) -> ServiceError:
        """Translate a core error, keeping the offending field when known."""
        detail: dict[str, Any] = {}
        if isinstance(exc, FieldValidationError):
            detail["field"] = exc.field
        return cls(code=exc.code, message=exc.message, detail=detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse_uri"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
