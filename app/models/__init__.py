"""Submission types and response envelopes.

This module contains data models used for:
- the validated submission record and validation outcomes
- API response serialization
"""

from app.models.responses import ErrorResponse, SuccessResponse
from app.models.submission import (
    ERROR_MESSAGES,
    REQUIRED_FIELDS,
    ErrorCode,
    Invalid,
    SubmissionRecord,
    Valid,
    ValidationOutcome,
)

__all__ = [
    "ERROR_MESSAGES",
    "REQUIRED_FIELDS",
    "ErrorCode",
    "ErrorResponse",
    "Invalid",
    "SubmissionRecord",
    "SuccessResponse",
    "Valid",
    "ValidationOutcome",
]
