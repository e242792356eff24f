"""Create Enrollment — server use-case behind POST /api/enroll.

Invariants:
    - Presence check runs on the raw body, by wire name, before anything else
    - Only the seven wire-named fields reach the repository, values unchanged
    - Non-text values fail parsing (pydantic ValidationError) after the presence check
"""

from typing import Mapping

from enrollment.core.repository_protocols import EnrollmentLike, EnrollmentRepository
from enrollment.core.required_fields import check_required_fields
from enrollment.schemas.enrollment import EnrollmentPayload


async def create_enrollment(
    body: Mapping[str, object], repository: EnrollmentRepository,
) -> EnrollmentLike:
    """Check required fields, then persist. Raises MissingFieldError first."""
    check_required_fields(body)
    payload = EnrollmentPayload.model_validate(body)
    return await repository.create(payload.wire_fields())
