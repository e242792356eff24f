"""Form Validator — per-field rules for the enrollment form.

Invariants:
    - Pure and deterministic: same input, same FieldErrors
    - One entry per field in FIELD_ORDER; "" means the field passed
    - Absent or None values are treated as empty text
    - Never raises

Design Decisions:
    - Rule table keyed by EnrollmentField: rules are independent, no cross-field checks
    - Lengths are len() of the raw value, no strip(): whitespace-only input
      of sufficient length passes (matches the browser form's behavior)
    - Email is a shape check only (local@domain.tld), no MX/deliverability;
      fullmatch, so a trailing newline fails like any other whitespace
"""

import re
from dataclasses import dataclass
from typing import Callable, Mapping

from enrollment.core.domain_types import EnrollmentField, FieldErrors, FIELD_ORDER

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class FieldRule:
    check: Callable[[str], bool]
    message: str


def _min_length(n: int) -> Callable[[str], bool]:
    return lambda value: len(value) >= n


FIELD_RULES: dict[EnrollmentField, FieldRule] = {
    EnrollmentField.STUDENT_NAME: FieldRule(
        _min_length(2), "Student name must be at least 2 characters.",
    ),
    EnrollmentField.EMAIL: FieldRule(
        lambda value: EMAIL_PATTERN.fullmatch(value) is not None,
        "Please enter a valid email address.",
    ),
    EnrollmentField.DATE_OF_BIRTH: FieldRule(
        _min_length(1), "Date of birth is required.",
    ),
    EnrollmentField.ADDRESS: FieldRule(
        _min_length(5), "Address must be at least 5 characters.",
    ),
    EnrollmentField.CITY_STATE_ZIP: FieldRule(
        _min_length(5), "City, state, and zip code are required.",
    ),
    EnrollmentField.PHONE_HOME: FieldRule(
        _min_length(10), "Home phone must be at least 10 digits.",
    ),
    EnrollmentField.PHONE_CELL: FieldRule(
        _min_length(10), "Cell phone must be at least 10 digits.",
    ),
}


@dataclass(frozen=True)
class ValidationResult:
    errors: FieldErrors
    valid: bool


def validate_field(field: EnrollmentField, value: str | None) -> str:
    """Return the error message for one field, or "" if it passes."""
    rule = FIELD_RULES[field]
    text = value if isinstance(value, str) else ""
    return "" if rule.check(text) else rule.message


def validate_enrollment(values: Mapping[str, str | None]) -> ValidationResult:
    """Check every field of one enrollment. Keys are wire names."""
    errors: FieldErrors = {
        f.value: validate_field(f, values.get(f.value)) for f in FIELD_ORDER
    }
    return ValidationResult(
        errors=errors, valid=not any(errors.values()),
    )
