"""Enrollment HTTP Client — httpx transport for the form's submit call.

Invariants:
    - Base URL and timeout come from Settings
    - Every request sends and accepts JSON

Design Decisions:
    - Factory returns an unopened AsyncClient: the caller owns its lifetime
      (async with ...) and can inject a MockTransport in tests
"""

import httpx

from enrollment.config import Settings, get_settings

ENROLL_PATH = "/api/enroll"


def create_enrollment_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.enroll_api_base_url,
        timeout=settings.enroll_request_timeout_seconds,
        headers={"Accept": "application/json"},
        transport=transport,
    )
