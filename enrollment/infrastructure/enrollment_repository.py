"""Enrollment Repository — SQLAlchemy implementation of EnrollmentRepository.

Invariants:
    - create() inserts exactly one row and commits it
    - The session is owned by the caller (request scope); this class never closes it

Design Decisions:
    - Session passed in, no module-level client: lifecycle belongs to get_db
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from enrollment.models.enrollment import Enrollment
from enrollment.schemas.enrollment import EnrollmentCreate

logger = logging.getLogger(__name__)


class SqlEnrollmentRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, record: dict[str, str]) -> Enrollment:
        data = EnrollmentCreate.model_validate(record)
        enrollment = Enrollment(**data.model_dump())
        self._db.add(enrollment)
        await self._db.commit()
        await self._db.refresh(enrollment)
        logger.info(
            "Enrollment created", extra={"enrollment_id": str(enrollment.id)},
        )
        return enrollment
