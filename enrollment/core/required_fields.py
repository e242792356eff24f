"""Required Fields — server-side presence check for an enrollment payload.

Invariants:
    - Fields checked in FIELD_ORDER; the first missing or falsy one fails
    - Only presence is checked: no length, no email shape
    - Reports a single field, never an accumulated list

Design Decisions:
    - First-failure reporting on the server, full-form reporting on the client:
      the browser form already shows every message inline
"""

from typing import Mapping

from enrollment.core.domain_types import EnrollmentField, FIELD_ORDER
from enrollment.core.errors import MissingFieldError


def first_missing_field(body: Mapping[str, object]) -> EnrollmentField | None:
    """Return the first required field that is absent or falsy, else None."""
    for field in FIELD_ORDER:
        if not body.get(field.value):
            return field
    return None


def check_required_fields(body: Mapping[str, object]) -> None:
    """Raise MissingFieldError naming the first absent field."""
    missing = first_missing_field(body)
    if missing is not None:
        raise MissingFieldError(missing.value)
