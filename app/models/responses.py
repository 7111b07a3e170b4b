"""Response envelopes returned by the submit endpoint."""

from typing import Any, Literal

from pydantic import BaseModel, Field

SUCCESS_MESSAGE = "User data validated and processed successfully"


class SuccessResponse(BaseModel):
    """Echo of a submission that passed validation."""

    status: Literal["success"] = "success"
    message: str = SUCCESS_MESSAGE
    data: dict[str, Any] = Field(..., description="Submitted fields, unchanged")


class ErrorResponse(BaseModel):
    """Single failure with a stable code.

    The human-readable text lives under ``error``, not ``message``.
    """

    status: Literal["error"] = "error"
    code: str = Field(..., description="Machine-readable error code")
    error: str = Field(..., description="Human-readable error message")
