"""Domain Types — enums for form fields and the submit lifecycle.

Invariants:
    - EnrollmentField values are the wire names (camelCase JSON keys)
    - EnrollmentField declaration order is the required-field check order
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class EnrollmentField(str, Enum):
    """The seven enrollment form fields, in submission-check order."""
    STUDENT_NAME = "studentName"
    EMAIL = "email"
    DATE_OF_BIRTH = "dateOfBirth"
    ADDRESS = "address"
    CITY_STATE_ZIP = "cityStateZip"
    PHONE_HOME = "phoneHome"
    PHONE_CELL = "phoneCell"


class SubmissionPhase(str, Enum):
    """Client submit lifecycle. Success and failure both return to IDLE."""
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


class SubmitOutcome(str, Enum):
    """Result of one submit attempt, as seen by the caller."""
    SUBMITTED = "submitted"
    REJECTED = "rejected"   # client validation failed, no request sent
    FAILED = "failed"       # server rejected or transport failed
    IGNORED = "ignored"     # another submission already in flight


# Check order, shared by client and server
FIELD_ORDER: tuple[EnrollmentField, ...] = tuple(EnrollmentField)

FieldErrors = dict[str, str]
