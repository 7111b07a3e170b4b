"""Field validation rules for contact submissions.

Every check is a pure function returning ``None`` when the value passes and
an ``Invalid`` when it fails. ``VALIDATION_RULES`` fixes the order the checks
run in; ``validate_submission`` stops at the first failure, so a record that
breaks several rules reports only the earliest one.
"""

import math
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from app.models.submission import (
    REQUIRED_FIELDS,
    ErrorCode,
    Invalid,
    SubmissionRecord,
    Valid,
    ValidationOutcome,
)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
# Plain decimal notation with ASCII digits only.
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

MIN_AGE = 18
MAX_AGE = 120

Rule = Callable[[Mapping[str, Any]], Invalid | None]


def is_present(value: Any) -> bool:
    """Missing, null, empty, false and zero-valued fields count as absent."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def check_presence(
    record: Mapping[str, Any], required_fields: Sequence[str] = REQUIRED_FIELDS
) -> Invalid | None:
    if all(is_present(record.get(field)) for field in required_fields):
        return None
    return Invalid.of(ErrorCode.MISSING_FIELDS)


def check_email(value: Any) -> Invalid | None:
    if isinstance(value, str) and EMAIL_PATTERN.fullmatch(value):
        return None
    return Invalid.of(ErrorCode.INVALID_EMAIL)


def coerce_number(value: Any) -> float | None:
    """Best-effort numeric coercion; ``None`` when the value is not a number.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not NUMBER_PATTERN.fullmatch(text):
            return None
        value = text
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def check_age(value: Any) -> Invalid | None:
    number = coerce_number(value)
    if number is not None and number.is_integer() and MIN_AGE <= number <= MAX_AGE:
        return None
    return Invalid.of(ErrorCode.INVALID_AGE)


def _phone_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def check_phone(value: Any) -> Invalid | None:
    text = _phone_text(value)
    if text is not None and PHONE_PATTERN.fullmatch(text):
        return None
    return Invalid.of(ErrorCode.INVALID_PHONE)


def _field_rule(field: str, check: Callable[[Any], Invalid | None]) -> Rule:
    def rule(record: Mapping[str, Any]) -> Invalid | None:
        return check(record.get(field))

    rule.__name__ = f"check_{field}"
    return rule


VALIDATION_RULES: tuple[Rule, ...] = (
    check_presence,
    _field_rule("email", check_email),
    _field_rule("age", check_age),
    _field_rule("phone", check_phone),
)


def validate_submission(record: Mapping[str, Any]) -> ValidationOutcome:
    """Run ``VALIDATION_RULES`` in order against ``record``.

    Returns the first ``Invalid`` produced, or a ``Valid`` holding the typed
    record alongside the submitted mapping.
    """
    for rule in VALIDATION_RULES:
        failure = rule(record)
        if failure is not None:
            return failure

    typed = SubmissionRecord(
        name=str(record["name"]),
        email=record["email"],
        age=int(coerce_number(record["age"])),
        phone=_phone_text(record["phone"]),
    )
    return Valid(record=typed, data=dict(record))
