"""Service test fixtures — fake notifier and mock HTTP transport.

Invariants:
    - No real network: every AsyncClient is backed by httpx.MockTransport
    - Every request the controller sends is recorded for assertions
"""

import json

import httpx
import pytest

from enrollment.services.submission_controller import SubmissionController

from tests.services.form_helpers import RecordingNotifier


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def server():
    """Configurable fake enrollment endpoint.

    Returns dict with:
      - requests: list of decoded JSON bodies received
      - respond: callable(request) -> httpx.Response, replaceable per test
    """
    state = {"requests": []}

    def default_respond(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(200, json={"id": "rec-1", **body})

    state["respond"] = default_respond

    async def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(json.loads(request.content))
        return state["respond"](request)

    state["transport"] = httpx.MockTransport(handler)
    return state


@pytest.fixture
async def controller(server, notifier):
    async with httpx.AsyncClient(
        transport=server["transport"], base_url="http://test",
    ) as client:
        yield SubmissionController(client, notifier)
