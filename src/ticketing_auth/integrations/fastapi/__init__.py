"""FastAPI integration for ticketing-auth."""

from ticketing_auth.integrations.fastapi.errors import install_error_handlers
from ticketing_auth.integrations.fastapi.router import create_auth_router

__all__ = [
    "create_auth_router",
    "install_error_handlers",
]
