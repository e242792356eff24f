"""Root conftest — shared test configuration and sample data."""

import os

import pytest

# Never point tests at a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def valid_enrollment() -> dict[str, str]:
    """A form that passes every client rule."""
    return {
        "studentName": "Al",
        "email": "a@b.com",
        "dateOfBirth": "2000-01-01",
        "address": "12345 Ave",
        "cityStateZip": "Springfield, IL 62701",
        "phoneHome": "5551234567",
        "phoneCell": "5559876543",
    }
