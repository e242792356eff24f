"""Enrollment Schemas — parse-then-validate boundary for POST /api/enroll.

Invariants:
    - EnrollmentPayload accepts any subset of the seven fields (all optional text),
      by camelCase wire name only
    - EnrollmentCreate is only built after the presence check passed
    - EnrollmentResponse echoes the stored fields verbatim plus id and createdAt

Design Decisions:
    - Presence is NOT a Pydantic constraint: the ordered first-failure check in
      core/required_fields.py decides the 400 message, not Pydantic's error list
    - Unknown keys ignored, matching a JSON body read field by field
    - No strip/length constraints: the server enforces presence only
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class EnrollmentPayload(BaseModel):
    """Raw request body. Every field may be missing or null.

    Only camelCase keys are read; snake_case keys count as unknown and are dropped.
    """
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=False, extra="ignore",
    )

    student_name: str | None = None
    email: str | None = None
    date_of_birth: str | None = None
    address: str | None = None
    city_state_zip: str | None = None
    phone_home: str | None = None
    phone_cell: str | None = None

    def wire_fields(self) -> dict[str, str | None]:
        """Field values keyed by wire name (studentName, email, ...)."""
        return self.model_dump(by_alias=True)


class EnrollmentCreate(_CamelModel):
    """A payload whose seven fields are all present and non-empty."""
    student_name: str
    email: str
    date_of_birth: str
    address: str
    city_state_zip: str
    phone_home: str
    phone_cell: str


class EnrollmentResponse(_CamelModel):
    """Created enrollment record as returned to the client."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    student_name: str
    email: str
    date_of_birth: str
    address: str
    city_state_zip: str
    phone_home: str
    phone_cell: str
    created_at: datetime
