"""Validation stage for form submissions.

Every field is checked and all failures are reported together, so the form
can show every problem at once.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from src.models.user import MESSAGE_MAX_LENGTH, NAME_MAX_LENGTH
from src.schemas.submission import PASSWORD_MIN_LENGTH, FieldError, SubmissionForm

PRESERVED_FIELDS = ("name", "email", "message")


@dataclass(frozen=True)
class FieldRule:
    """Message for a field failure.

    An empty ``error_types`` matches any pydantic error on the field.
    """

    field: str
    error_types: frozenset[str]
    message: str

    def matches(self, field: str, error_type: str) -> bool:
        return self.field == field and (not self.error_types or error_type in self.error_types)


# Ordered: the first matching rule wins
VALIDATION_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "name",
        frozenset({"string_too_long"}),
        f"Name must be at most {NAME_MAX_LENGTH} characters",
    ),
    FieldRule("name", frozenset(), "Name is required"),
    FieldRule("email", frozenset(), "Valid email is required"),
    FieldRule(
        "password",
        frozenset(),
        f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
    ),
    FieldRule(
        "message",
        frozenset({"string_too_long"}),
        f"Message must be at most {MESSAGE_MAX_LENGTH} characters",
    ),
    FieldRule("message", frozenset(), "Message must be text"),
)


def message_for(field: str, error_type: str) -> str:
    """Return the user-facing message for a failed field."""
    for rule in VALIDATION_RULES:
        if rule.matches(field, error_type):
            return rule.message
    return "Invalid value"


def collect_errors(exc: ValidationError) -> list[FieldError]:
    """Translate a pydantic ValidationError into form errors, one per message."""
    errors: list[FieldError] = []
    seen: set[tuple[str, str]] = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        msg = message_for(field, error["type"])
        if (field, msg) in seen:
            continue
        seen.add((field, msg))
        errors.append(FieldError(field=field, msg=msg))
    return errors


def validate_submission(
    raw: Mapping[str, Any],
) -> tuple[SubmissionForm | None, list[FieldError]]:
    """Run the validation stage over raw submitted fields.

    Returns the validated form and an empty list, or ``None`` and the list of
    field errors.
    """
    data = {key: raw.get(key) for key in ("name", "email", "password", "message")}
    try:
        form = SubmissionForm.model_validate(data)
    except ValidationError as e:
        return None, collect_errors(e)
    return form, []


def preserved_values(raw: Mapping[str, Any]) -> dict[str, str]:
    """Values echoed back into the form after a failure. Never includes the password."""
    old = {}
    for key in PRESERVED_FIELDS:
        value = raw.get(key)
        old[key] = value.strip() if isinstance(value, str) else ""
    return old
