"""ticketing-auth — user signup with salted Argon2id credentials for the ticketing platform."""

__version__ = "0.1.0"

from ticketing_auth.config import PasswordHashConfig, PasswordPolicy
from ticketing_auth.core.auth import AuthError
from ticketing_auth.core.schemas import ErrorResponse, SignupRequest, UserResponse
from ticketing_auth.events import UserCreated, UserDeleted
from ticketing_auth.integrations.fastapi.errors import install_error_handlers
from ticketing_auth.models.user import User as AuthUser
from ticketing_auth.ticketing_auth import TicketingAuth
from ticketing_auth.utils.passwords import (
    MalformedCredentialError,
    PasswordHashingError,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)

__all__ = [
    "AuthError",
    "AuthUser",
    "ErrorResponse",
    "MalformedCredentialError",
    "PasswordHashConfig",
    "PasswordHashingError",
    "PasswordPolicy",
    "SignupRequest",
    "TicketingAuth",
    "UserCreated",
    "UserDeleted",
    "UserResponse",
    "hash_password",
    "hash_password_async",
    "install_error_handlers",
    "verify_password",
    "verify_password_async",
]
