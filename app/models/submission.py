"""Submission record and validation outcome types."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "age", "phone")


class ErrorCode(str, Enum):
    """Machine-readable codes, listed in the order the rules run."""

    MISSING_FIELDS = "ERR_MISSING_FIELDS"
    INVALID_EMAIL = "ERR_INVALID_EMAIL"
    INVALID_AGE = "ERR_INVALID_AGE"
    INVALID_PHONE = "ERR_INVALID_PHONE"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_FIELDS: "Name, email, age, and phone are required",
    ErrorCode.INVALID_EMAIL: "Invalid email format",
    ErrorCode.INVALID_AGE: "Age must be a number between 18 and 120",
    ErrorCode.INVALID_PHONE: "Invalid phone number format (must be 10 digits)",
}


class SubmissionRecord(BaseModel):
    """A contact submission that passed every rule."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    age: int
    phone: str


@dataclass(frozen=True)
class Valid:
    """All rules passed.

    ``data`` is the submitted mapping exactly as decoded, kept for the echo.
    """

    record: SubmissionRecord
    data: dict[str, Any]


@dataclass(frozen=True)
class Invalid:
    """The first rule that failed."""

    code: ErrorCode
    message: str

    @classmethod
    def of(cls, code: ErrorCode) -> "Invalid":
        return cls(code=code, message=ERROR_MESSAGES[code])


ValidationOutcome = Valid | Invalid
