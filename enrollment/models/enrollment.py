"""Enrollment ORM — one row per successful form submission.

Invariants:
    - id is a UUID primary key assigned on insert
    - The seven form fields are stored verbatim (no trimming, no normalization)
    - Rows are created once and never updated or deleted by the application

Design Decisions:
    - snake_case columns, camelCase on the wire: schemas/enrollment.py maps between them
    - Text columns without length limits: the server only enforces presence
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from enrollment.db.base import Base


class Enrollment(Base):
    """Persisted enrollment record."""
    __tablename__ = "enrollments"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    student_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    date_of_birth: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    city_state_zip: Mapped[str] = mapped_column(Text, nullable=False)
    phone_home: Mapped[str] = mapped_column(Text, nullable=False)
    phone_cell: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
