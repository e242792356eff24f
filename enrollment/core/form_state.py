"""Form State — in-memory field values, field errors and submit phase for one form.

Invariants:
    - values and errors always hold exactly one entry per EnrollmentField
    - Editing a field clears only that field's error (no re-validation)
    - is_submitting is True iff phase is SUBMITTING
    - reset_values() empties values but leaves errors as last computed

Design Decisions:
    - Dataclass with computed properties: pure, deterministic, testable without mocks
    - Unknown field names raise KeyError: a programming error, not user input
"""

from dataclasses import dataclass, field

from enrollment.core.domain_types import (
    EnrollmentField, FieldErrors, SubmissionPhase, FIELD_ORDER,
)


def _empty_fields() -> dict[str, str]:
    return {f.value: "" for f in FIELD_ORDER}


@dataclass
class FormState:
    """Per-form UI state: pure dataclass, no IO."""

    values: dict[str, str] = field(default_factory=_empty_fields)
    errors: FieldErrors = field(default_factory=_empty_fields)
    phase: SubmissionPhase = SubmissionPhase.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.phase == SubmissionPhase.SUBMITTING

    @property
    def has_errors(self) -> bool:
        return any(self.errors.values())

    def set_field(self, name: str | EnrollmentField, value: str) -> None:
        """Replace one value; clear that field's error if it has one."""
        try:
            key = EnrollmentField(name).value
        except ValueError:
            raise KeyError(f"Unknown enrollment field: {name}") from None
        self.values[key] = value
        if self.errors[key]:
            self.errors[key] = ""

    def publish_errors(self, errors: FieldErrors) -> None:
        self.errors = {f.value: errors.get(f.value, "") for f in FIELD_ORDER}

    def reset_values(self) -> None:
        self.values = _empty_fields()

    def snapshot(self) -> dict[str, str]:
        """Copy of the values, in field order, for the request body."""
        return {f.value: self.values[f.value] for f in FIELD_ORDER}
