"""Pydantic schemas for API requests and responses."""

from src.schemas.submission import FieldError, SubmissionForm
from src.schemas.user import UserResponse

__all__ = [
    "SubmissionForm",
    "FieldError",
    "UserResponse",
]
