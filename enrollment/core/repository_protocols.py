"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Notifier is sync and fire-and-forget: its return value is never consumed
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID


class EnrollmentLike(Protocol):
    """Structural contract for a persisted enrollment record."""
    id: UUID
    student_name: str
    email: str
    date_of_birth: str
    address: str
    city_state_zip: str
    phone_home: str
    phone_cell: str
    created_at: datetime


class EnrollmentRepository(Protocol):
    """Contract for enrollment persistence, implemented by shell."""
    async def create(self, record: dict[str, str]) -> EnrollmentLike: ...


class Notifier(Protocol):
    """Contract for user-facing toast notifications, implemented by shell."""
    def notify_success(self, title: str, description: str) -> None: ...
    def notify_failure(self, title: str, description: str) -> None: ...
