"""Core auth service — signup and stored-credential checks.

Framework-agnostic business logic. All functions take an AsyncSession and config.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_auth.config import PasswordPolicy, TicketingAuthConfig
from ticketing_auth.core.schemas import UserResponse
from ticketing_auth.repositories import user as user_repo
from ticketing_auth.utils.passwords import (
    MalformedCredentialError,
    hash_password_async,
    verify_password_async,
)

if TYPE_CHECKING:
    from ticketing_auth.events import EventCollector

logger = logging.getLogger("ticketing_auth.auth")


class AuthError(Exception):
    """Base auth error with an error code and HTTP status.

    Extra keyword arguments (e.g. ``field="email"``) travel with the error
    into the HTTP error body.
    """

    def __init__(self, message: str, code: str, status_code: int = 400, **extra):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.extra = extra
        super().__init__(message)


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_MAX_EMAIL_LENGTH = 254


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _is_utf8(value: str) -> bool:
    # JSON bodies can carry lone surrogates, which cannot be hashed or stored.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _validate_email(email: str) -> str:
    """Basic email format validation — no dependencies, just a sanity check."""
    email = normalize_email(email)
    if len(email) > _MAX_EMAIL_LENGTH or not _EMAIL_RE.match(email) or not _is_utf8(email):
        raise AuthError("Email must be valid", code="invalid_email", status_code=400, field="email")
    return email


def _validate_password(password: str, policy: PasswordPolicy) -> None:
    if not _is_utf8(password):
        raise AuthError("Password must be valid", code="invalid_password", status_code=400, field="password")
    if not policy.min_length <= len(password) <= policy.max_length:
        raise AuthError(
            f"Password must be between {policy.min_length} and {policy.max_length} characters",
            code="invalid_password",
            status_code=400,
            field="password",
        )


async def signup(
    session: AsyncSession,
    *,
    config: TicketingAuthConfig,
    email: str,
    password: str,
    events: EventCollector | None = None,
) -> UserResponse:
    """Register a new user with email and password.

    Raises:
        AuthError: If email is invalid (code: invalid_email, status: 400).
        AuthError: If password length is out of bounds (code: invalid_password, status: 400).
        AuthError: If email is already registered (code: email_in_use, status: 400).
        PasswordHashingError: If the credential could not be derived.
    """
    email = _validate_email(email)
    _validate_password(password, config.password_policy)

    existing = await user_repo.get_user_by_email(session, email)
    if existing is not None:
        logger.info("Signup rejected: email in use")
        raise AuthError("Email in use", code="email_in_use", status_code=400)

    hashed = await hash_password_async(password, config.password_hash)
    try:
        user = await user_repo.create_user(session, email=email, password_hash=hashed)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email.
        logger.info("Signup rejected: email in use (concurrent insert)")
        raise AuthError("Email in use", code="email_in_use", status_code=400) from None

    logger.info("User %s created", user.id)

    if events is not None:
        from ticketing_auth.events import UserCreated

        events.collect("user_created", UserCreated(user_id=user.id, email=user.email))

    return UserResponse.model_validate(user)


async def check_password(
    session: AsyncSession,
    *,
    config: TicketingAuthConfig,
    email: str,
    password: str,
) -> bool:
    """Check a password against the user's stored credential.

    Returns False for an unknown email or a wrong password.

    Raises:
        MalformedCredentialError: If the stored credential is corrupt. Logged
            here so corruption is distinguishable from a wrong password.
    """
    user = await user_repo.get_user_by_email(session, normalize_email(email))
    if user is None:
        return False

    try:
        return await verify_password_async(password, user.password_hash, config.password_hash)
    except MalformedCredentialError:
        logger.error("Stored credential for user %s is malformed", user.id)
        raise
