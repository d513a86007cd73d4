"""Form submission schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.models.user import MESSAGE_MAX_LENGTH, NAME_MAX_LENGTH

PASSWORD_MIN_LENGTH = 6


class SubmissionForm(BaseModel):
    """Validated signup form fields."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    message: str | None = Field(None, max_length=MESSAGE_MAX_LENGTH)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("message", mode="before")
    @classmethod
    def blank_message_to_none(cls, value):
        """Treat a missing, empty or whitespace-only message as absent."""
        if isinstance(value, str):
            value = value.strip()
        return value or None


class FieldError(BaseModel):
    """A single validation or storage error shown on the form."""

    field: str | None = None
    msg: str
