"""Signup schemas — request/response models for the core auth logic."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class SignupRequest(BaseModel):
    """Email/password signup input.

    Shape only; email format and password length are checked by the
    signup service against the configured PasswordPolicy.
    """
    email: str
    password: str


class UserResponse(BaseModel):
    """User data returned in API responses (never the stored credential)."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    created_at: datetime


class ErrorItem(BaseModel):
    """One entry of an error response."""
    message: str
    code: str | None = None
    field: str | None = None


class ErrorResponse(BaseModel):
    """Uniform error body: ``{"errors": [{"message": ..., "code": ..., "field": ...}]}``."""
    errors: list[ErrorItem]
