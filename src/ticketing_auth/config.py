"""ticketing-auth configuration — dataclasses for password policy, hashing, and service settings."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """Length bounds a signup password must satisfy.

    Example:
        PasswordPolicy()                    # 4–20 characters
        PasswordPolicy(max_length=64)       # Allow longer passphrases
    """

    min_length: int = 4
    max_length: int = 20

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise ValueError(f"min_length must be at least 1, got {self.min_length}")
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            )


@dataclass(frozen=True, slots=True)
class PasswordHashConfig:
    """Argon2id parameters for stored credentials.

    ``memory_cost`` is in KiB. Salt and key lengths are in bytes; the stored
    credential holds both hex-encoded, so the defaults produce a
    128 + 1 + 16 character string.
    """

    salt_bytes: int = 8
    key_bytes: int = 64
    time_cost: int = 2
    memory_cost: int = 19456  # 19 MiB
    parallelism: int = 1

    def __post_init__(self) -> None:
        """Reject parameters the Argon2 primitive would refuse at hash time."""
        if self.salt_bytes < 8:
            raise ValueError(f"salt_bytes must be at least 8, got {self.salt_bytes}")
        if self.key_bytes < 4:
            raise ValueError(f"key_bytes must be at least 4, got {self.key_bytes}")
        if self.time_cost < 1:
            raise ValueError(f"time_cost must be at least 1, got {self.time_cost}")
        if self.parallelism < 1:
            raise ValueError(f"parallelism must be at least 1, got {self.parallelism}")
        if self.memory_cost < 8 * self.parallelism:
            raise ValueError(
                f"memory_cost must be at least 8 * parallelism "
                f"({8 * self.parallelism}), got {self.memory_cost}"
            )


@dataclass(frozen=True, slots=True)
class TicketingAuthConfig:
    """Internal config built by the TicketingAuth constructor. Not user-facing."""

    database_url: str
    database_echo: bool = False
    allow_signup: bool = True
    password_policy: PasswordPolicy = field(default_factory=PasswordPolicy)
    password_hash: PasswordHashConfig = field(default_factory=PasswordHashConfig)
