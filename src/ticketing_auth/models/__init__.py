"""ticketing-auth SQLModel models — central registry.

Import all models here so SQLModel.metadata is populated for Alembic.
"""

from ticketing_auth.models.user import User

__all__ = [
    "User",
]
