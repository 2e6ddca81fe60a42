"""ServiceResult and ServiceError — what every service method returns.

INVARIANT: Service methods never raise for domain failures. A
:class:`~zonectl.domain.errors.BlueprintError` becomes ``ok=False`` with
the error code carried through unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from zonectl.domain.errors import BlueprintError, error_kind


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``detail["kind"]`` classifies the code for transports
    (``not_found`` / ``bad_request`` / ``internal``).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BlueprintError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail={"kind": error_kind(exc.code)})

    @property
    def kind(self) -> str:
        return self.detail.get("kind") or error_kind(self.code)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_zone"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, resolved roots, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: BlueprintError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
