"""Form State — field edits, optimistic error clearing, reset.

Invariants:
    - New state holds empty values and empty errors for all seven fields
    - set_field clears only the edited field's error
    - reset_values keeps errors untouched
    - Unknown fields raise KeyError
"""

import pytest

from enrollment.core.domain_types import EnrollmentField, SubmissionPhase, FIELD_ORDER
from enrollment.core.form_state import FormState


def test_new_state_is_empty_and_idle():
    state = FormState()
    assert state.values == {f.value: "" for f in FIELD_ORDER}
    assert state.errors == {f.value: "" for f in FIELD_ORDER}
    assert state.phase == SubmissionPhase.IDLE
    assert state.is_submitting is False
    assert state.has_errors is False


def test_set_field_accepts_wire_name_and_enum():
    state = FormState()
    state.set_field("studentName", "Ada")
    state.set_field(EnrollmentField.EMAIL, "ada@example.com")
    assert state.values["studentName"] == "Ada"
    assert state.values["email"] == "ada@example.com"


def test_set_field_clears_only_that_fields_error():
    state = FormState()
    state.publish_errors({"studentName": "too short", "email": "bad email"})

    state.set_field("studentName", "A")

    assert state.errors["studentName"] == ""
    assert state.errors["email"] == "bad email"


def test_set_field_does_not_revalidate():
    state = FormState()
    state.set_field("phoneCell", "1")
    assert state.errors["phoneCell"] == ""


def test_publish_errors_fills_missing_entries():
    state = FormState()
    state.publish_errors({"address": "Address must be at least 5 characters."})
    assert list(state.errors) == [f.value for f in FIELD_ORDER]
    assert state.errors["email"] == ""
    assert state.has_errors is True


def test_reset_values_keeps_errors():
    state = FormState()
    state.set_field("address", "1 Main")
    state.publish_errors({"email": "bad"})
    state.reset_values()
    assert state.values["address"] == ""
    assert state.errors["email"] == "bad"


def test_unknown_field_raises_key_error():
    with pytest.raises(KeyError):
        FormState().set_field("middleName", "Q")


def test_is_submitting_tracks_phase():
    state = FormState()
    state.phase = SubmissionPhase.SUBMITTING
    assert state.is_submitting is True
    state.phase = SubmissionPhase.VALIDATING
    assert state.is_submitting is False


def test_snapshot_is_a_copy():
    state = FormState()
    state.set_field("studentName", "Al")
    snap = state.snapshot()
    state.reset_values()
    assert snap["studentName"] == "Al"
