"""Submission Controller — drives one enrollment form from input to persisted record.

Invariants:
    - Validation failure and the network call are mutually exclusive per attempt
    - At most one submission in flight: submit() while SUBMITTING is ignored
    - Every attempt ends in SubmissionPhase.IDLE, success or failure
    - Success resets the values; failure keeps them so the user can resubmit
    - Editing a field clears only that field's error (no re-validation)

Design Decisions:
    - Pure state in core/form_state.py, IO here: the controller is the shell
      around FormState and validate_enrollment
    - httpx.AsyncClient injected: base URL, timeout and transport are the caller's
    - The in-flight guard needs no lock: validation is synchronous, so the
      phase flips to SUBMITTING before the first await
"""

import logging
from typing import Any

import httpx

from enrollment.core.domain_types import (
    EnrollmentField, FieldErrors, SubmissionPhase, SubmitOutcome,
)
from enrollment.core.errors import (
    EnrollmentError, SubmissionRejectedError, TransportFailureError,
)
from enrollment.core.form_state import FormState
from enrollment.core.form_validator import validate_enrollment
from enrollment.core.repository_protocols import Notifier
from enrollment.infrastructure.http_client import ENROLL_PATH
from enrollment.infrastructure.notifications import LoggingNotifier

logger = logging.getLogger(__name__)

INVALID_FORM_TITLE = "Invalid Form"
INVALID_FORM_MESSAGE = "Please correct the errors in the form"
SUCCESS_TITLE = "Enrollment Submitted"
SUCCESS_MESSAGE = "Your enrollment has been successfully submitted."
FAILURE_TITLE = "Submission Failed"
FALLBACK_FAILURE_MESSAGE = "Failed to submit enrollment"


class SubmissionController:
    """Owns one form's values, errors and submit lifecycle."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        notifier: Notifier | None = None,
        state: FormState | None = None,
    ):
        self._client = client
        self._notifier = notifier or LoggingNotifier()
        self.state = state or FormState()
        self.last_record: dict[str, Any] | None = None

    @property
    def values(self) -> dict[str, str]:
        return self.state.values

    @property
    def errors(self) -> FieldErrors:
        return self.state.errors

    @property
    def phase(self) -> SubmissionPhase:
        return self.state.phase

    @property
    def is_submitting(self) -> bool:
        return self.state.is_submitting

    def set_field(self, name: str | EnrollmentField, value: str) -> None:
        self.state.set_field(name, value)

    async def submit(self) -> SubmitOutcome:
        """Validate, then POST the form once. Returns what happened."""
        if self.state.is_submitting:
            logger.info("Submit ignored: a submission is already in flight")
            return SubmitOutcome.IGNORED

        self.state.phase = SubmissionPhase.VALIDATING
        result = validate_enrollment(self.state.values)
        self.state.publish_errors(result.errors)
        if not result.valid:
            self.state.phase = SubmissionPhase.IDLE
            invalid = [name for name, msg in result.errors.items() if msg]
            logger.info(f"Submit rejected by form validation: {', '.join(invalid)}")
            self._notifier.notify_failure(INVALID_FORM_TITLE, INVALID_FORM_MESSAGE)
            return SubmitOutcome.REJECTED

        self.state.phase = SubmissionPhase.SUBMITTING
        try:
            self.last_record = await self._send(self.state.snapshot())
        except EnrollmentError as e:
            logger.warning(
                f"Submission failed: {e.message}",
                extra={"error_code": e.code, "status_code": e.context.status_code},
            )
            self._notifier.notify_failure(FAILURE_TITLE, e.message)
            return SubmitOutcome.FAILED
        finally:
            self.state.phase = SubmissionPhase.IDLE

        self._notifier.notify_success(SUCCESS_TITLE, SUCCESS_MESSAGE)
        self.state.reset_values()
        return SubmitOutcome.SUBMITTED

    async def _send(self, body: dict[str, str]) -> dict[str, Any] | None:
        """POST the body. Returns the decoded record, if the server sent one."""
        try:
            response = await self._client.post(ENROLL_PATH, json=body)
        except httpx.HTTPError as e:
            logger.error(f"Enrollment request failed: {e!r}")
            raise TransportFailureError(FALLBACK_FAILURE_MESSAGE) from e

        if not response.is_success:
            raise SubmissionRejectedError(
                _server_message(response), response.status_code,
            )
        try:
            record = response.json()
        except ValueError:
            return None
        return record if isinstance(record, dict) else None


def _server_message(response: httpx.Response) -> str:
    """The server's {"error": ...} text, or the generic fallback."""
    try:
        body = response.json()
    except ValueError:
        return FALLBACK_FAILURE_MESSAGE
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message:
            return message
    return FALLBACK_FAILURE_MESSAGE
