"""Password hashing utilities — salted Argon2id stored as ``<hex key>.<hex salt>``."""

import asyncio
import functools
import hmac
import re
import secrets
from concurrent.futures import Executor

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from ticketing_auth.config import PasswordHashConfig

DELIMITER = "."
_HEX_RE = re.compile(r"[0-9a-fA-F]+")

# Argon2 refuses anything shorter.
_MIN_SALT_BYTES = 8
_MIN_KEY_BYTES = 4

DEFAULT_HASH_CONFIG = PasswordHashConfig()


class MalformedCredentialError(ValueError):
    """The stored credential is not a ``<hex key>.<hex salt>`` pair.

    Raised instead of returning False so callers can tell data corruption
    apart from a wrong password.
    """


class PasswordHashingError(RuntimeError):
    """The randomness source or the key-derivation primitive failed."""


def _derive_key(password: str, salt: bytes, params: PasswordHashConfig, key_length: int) -> bytes:
    try:
        return hash_secret_raw(
            secret=password.encode("utf-8"),
            salt=salt,
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=key_length,
            type=Type.ID,
        )
    except HashingError as e:
        raise PasswordHashingError(f"Key derivation failed: {e}") from e


def _split_credential(stored_credential: str) -> tuple[bytes, bytes]:
    """Return ``(key, salt)`` from a stored credential or raise MalformedCredentialError."""
    parts = stored_credential.split(DELIMITER)
    if len(parts) != 2:
        raise MalformedCredentialError(
            f"Expected 2 segments separated by '{DELIMITER}', got {len(parts)}"
        )

    key_hex, salt_hex = parts
    if not key_hex or not salt_hex:
        raise MalformedCredentialError("Stored credential has an empty segment")

    # bytes.fromhex() skips whitespace, so check the alphabet first.
    for segment in (key_hex, salt_hex):
        if not _HEX_RE.fullmatch(segment) or len(segment) % 2:
            raise MalformedCredentialError("Stored credential is not hex-encoded")

    key = bytes.fromhex(key_hex)
    salt = bytes.fromhex(salt_hex)
    if len(salt) < _MIN_SALT_BYTES:
        raise MalformedCredentialError(f"Salt must be at least {_MIN_SALT_BYTES} bytes, got {len(salt)}")
    if len(key) < _MIN_KEY_BYTES:
        raise MalformedCredentialError(f"Key must be at least {_MIN_KEY_BYTES} bytes, got {len(key)}")
    return key, salt


def hash_password(password: str, params: PasswordHashConfig = DEFAULT_HASH_CONFIG) -> str:
    """Hash a password with a fresh random salt using Argon2id.

    CPU- and memory-heavy; from async code use :func:`hash_password_async`.

    Args:
        password: The plain text password to hash. Must be non-empty
            (enforced by signup validation, not here).
        params: Argon2 cost parameters and salt/key lengths.

    Returns:
        The stored credential ``<hex key>.<hex salt>``.

    Raises:
        PasswordHashingError: If the OS randomness source or Argon2 fails.
    """
    try:
        salt = secrets.token_bytes(params.salt_bytes)
    except (OSError, NotImplementedError) as e:
        raise PasswordHashingError(f"Randomness source unavailable: {e}") from e

    key = _derive_key(password, salt, params, params.key_bytes)
    return f"{key.hex()}{DELIMITER}{salt.hex()}"


def verify_password(
    plain_password: str,
    stored_credential: str,
    params: PasswordHashConfig = DEFAULT_HASH_CONFIG,
) -> bool:
    """Verify a password against a stored credential.

    The key is re-derived with the configured cost parameters and the stored
    key's length, then compared with :func:`hmac.compare_digest`, so timing
    does not depend on where the keys first differ.

    Args:
        plain_password: The plain text password to verify.
        stored_credential: The ``<hex key>.<hex salt>`` string from storage.
        params: Argon2 cost parameters (must match those used to hash).

    Returns:
        True if the password matches, False otherwise.

    Raises:
        MalformedCredentialError: If the stored credential cannot be parsed.
        PasswordHashingError: If Argon2 fails.
    """
    stored_key, salt = _split_credential(stored_credential)
    candidate = _derive_key(plain_password, salt, params, len(stored_key))
    return hmac.compare_digest(candidate, stored_key)


async def hash_password_async(
    password: str,
    params: PasswordHashConfig = DEFAULT_HASH_CONFIG,
    *,
    executor: Executor | None = None,
) -> str:
    """Run :func:`hash_password` in an executor (the loop's default pool if None).

    Cancelling the awaiting task does not stop a derivation already running
    in the worker thread.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        executor, functools.partial(hash_password, password, params),
    )


async def verify_password_async(
    plain_password: str,
    stored_credential: str,
    params: PasswordHashConfig = DEFAULT_HASH_CONFIG,
    *,
    executor: Executor | None = None,
) -> bool:
    """Run :func:`verify_password` in an executor (the loop's default pool if None)."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        executor, functools.partial(verify_password, plain_password, stored_credential, params),
    )
