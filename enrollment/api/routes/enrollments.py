"""Enrollment Endpoint — POST /api/enroll, one record per accepted submission.

Invariants:
    - 400 {"error": "<field> is required"} for the first missing field, in field order
    - 200 with the created record on success
    - 500 {"error": "Failed to create enrollment"} for any persistence or unexpected
      failure; the cause is logged, never returned
    - The DB session comes from get_db and is released on every exit path

Design Decisions:
    - Repository provided by a dependency so tests can swap the persistence collaborator
    - Body read inside the try: unparseable JSON, a non-object body or non-text
      values end in the same generic 500 as a failed insert
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from enrollment.core.errors import EnrollmentCreateError, MissingFieldError
from enrollment.core.repository_protocols import EnrollmentRepository
from enrollment.infrastructure.database import get_db
from enrollment.infrastructure.enrollment_repository import SqlEnrollmentRepository
from enrollment.schemas.enrollment import EnrollmentResponse
from enrollment.services.create_enrollment import create_enrollment

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/enroll", tags=["enrollment"])


def get_enrollment_repository(
    db: AsyncSession = Depends(get_db),
) -> EnrollmentRepository:
    return SqlEnrollmentRepository(db)


@router.post(
    "", response_model=EnrollmentResponse, status_code=status.HTTP_200_OK,
)
async def enroll(
    request: Request,
    repository: EnrollmentRepository = Depends(get_enrollment_repository),
):
    """Create one enrollment record from the submitted form."""
    try:
        body = await request.json()
        if not isinstance(body, dict):
            raise TypeError(f"Expected a JSON object, got {type(body).__name__}")
        return await create_enrollment(body, repository)
    except MissingFieldError as e:
        logger.warning(
            f"Enrollment rejected: {e.message}",
            extra={"field": e.field_name, "path": request.url.path},
        )
        raise
    except Exception as e:
        logger.error(f"Error creating enrollment: {e}", exc_info=True)
        raise EnrollmentCreateError() from e
