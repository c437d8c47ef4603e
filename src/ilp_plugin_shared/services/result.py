"""ServiceResult: what every ValidationService call returns.

INVARIANT: A rejected object never reaches ``data``. On failure ``data`` is
empty and ``error`` says why; deprecation notices raised before the
failure are still reported in ``warnings``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from ilp_plugin_shared.domain.types import Addressing, Flow
from ilp_plugin_shared.errors import PluginError


class ErrorCode(StrEnum):
    INVALID_FIELDS = "INVALID_FIELDS"


class ServiceError(BaseModel):
    """Why an object was rejected. ``detail`` carries the error class name."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ResultMeta(BaseModel):
    """The flow a transfer or message was checked for, and its addressing.

    ``addressing`` is only known once validation got far enough to resolve
    the destination, so it stays None on failures.
    """

    model_config = {"frozen": True}

    flow: Flow
    addressing: Addressing | None = None


class ServiceResult(BaseModel):
    """Outcome of one validate or normalize call.

    Attributes:
        ok: Whether the object passed.
        op: Name of the operation (e.g. ``"normalize_transfer"``).
        data: The checked object (validate) or its canonical copy (normalize).
        warnings: Deprecation notices, such as use of the ``account`` field.
        error: Set when ``ok`` is False.
        meta: Flow and addressing; None for fulfillments.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: ResultMeta | None = None

    @classmethod
    def rejected(
        cls,
        op: str,
        exc: PluginError,
        *,
        warnings: list[str] | None = None,
        meta: ResultMeta | None = None,
    ) -> ServiceResult:
        """Build the failed result for an object that raised *exc*."""
        error = ServiceError(
            code=ErrorCode.INVALID_FIELDS,
            message=str(exc),
            detail={"error": exc.name},
        )
        return cls(ok=False, op=op, error=error, warnings=warnings or [], meta=meta)
