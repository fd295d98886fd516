"""TicketingAuth — instance-based signup service configuration and entry point."""

from __future__ import annotations

import uuid
from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from ticketing_auth.config import PasswordHashConfig, PasswordPolicy, TicketingAuthConfig
from ticketing_auth.core.schemas import UserResponse
from ticketing_auth.db import create_engine, create_session_factory, get_session
from ticketing_auth.events import EventCollector, HookRegistry, UserDeleted, _current_collector

if TYPE_CHECKING:
    from fastapi import APIRouter


class TicketingAuth:
    """Main TicketingAuth instance — holds all config and database connection state.

    Args:
        database_url: Required async database URL (e.g. postgresql+asyncpg://...).
        allow_signup: If False, the /signup endpoint returns 403. Programmatic
            create_user() always works regardless of this flag.
        password_policy: Length bounds for signup passwords (default 4–20).
        password_hash: Argon2id cost parameters and salt/key lengths.
        database_echo: Log every SQL statement (SQLAlchemy echo).
    """

    def __init__(
        self,
        database_url: str,
        *,
        allow_signup: bool = True,
        password_policy: PasswordPolicy | None = None,
        password_hash: PasswordHashConfig | None = None,
        database_echo: bool = False,
    ) -> None:
        self._config = TicketingAuthConfig(
            database_url=database_url,
            database_echo=database_echo,
            allow_signup=allow_signup,
            password_policy=password_policy or PasswordPolicy(),
            password_hash=password_hash or PasswordHashConfig(),
        )
        self._engine = create_engine(database_url, echo=database_echo)
        self._session_factory = create_session_factory(self._engine)
        self._hooks = HookRegistry()

    @property
    def config(self) -> TicketingAuthConfig:
        """Read-only access to the internal config."""
        return self._config

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Access the async session factory (e.g., for testing)."""
        return self._session_factory

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    # ------ Event hooks ------

    def on(self, event_name: str):
        """Decorator to register an event hook.

        Usage:
            @auth.on("user_created")
            async def handle(event):
                print(event.email)
        """
        def decorator(fn):
            self._hooks.register(event_name, fn)
            return fn
        return decorator

    def add_hook(self, event_name: str, callback) -> None:
        """Register an event hook callback programmatically."""
        self._hooks.register(event_name, callback)

    # ------ Database session helpers ------

    def get_session(self) -> AsyncGenerator[AsyncSession]:
        """Context manager for service-level code (non-FastAPI)."""
        return get_session(self._session_factory)

    async def _get_db(self) -> AsyncGenerator[AsyncSession]:
        """FastAPI dependency: yields a request-scoped session with event flushing."""
        collector = EventCollector(self._hooks)
        token = _current_collector.set(collector)
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                _current_collector.reset(token)
        await collector.flush()

    # ------ Account operations ------

    async def create_user(self, email: str, password: str) -> UserResponse:
        """Create a user programmatically. Always works regardless of allow_signup.

        Raises:
            AuthError: If the email or password is invalid, or the email is
                already registered.
        """
        from ticketing_auth.core.auth import signup

        collector = EventCollector(self._hooks)
        async with get_session(self._session_factory) as session:
            result = await signup(
                session, config=self._config, email=email,
                password=password, events=collector,
            )
        await collector.flush()
        return result

    async def check_password(self, email: str, password: str) -> bool:
        """Check a password against the stored credential for an email.

        Raises:
            MalformedCredentialError: If the stored credential is corrupt.
        """
        from ticketing_auth.core.auth import check_password

        async with get_session(self._session_factory) as session:
            return await check_password(
                session, config=self._config, email=email, password=password,
            )

    async def delete_user(self, user_id: uuid.UUID) -> None:
        """Delete a user and its stored credential.

        Raises:
            ValueError: If the user does not exist.
        """
        from ticketing_auth.repositories import user as user_repo

        collector = EventCollector(self._hooks)
        async with get_session(self._session_factory) as session:
            await user_repo.delete_user(session, user_id)
            collector.collect("user_deleted", UserDeleted(user_id=user_id))
        await collector.flush()

    # ------ FastAPI integration ------

    def fastapi_router(self) -> APIRouter:
        """Create a FastAPI router with the signup endpoint, bound to this instance.

        Mount it under a prefix and install the error handlers:
            app.include_router(auth.fastapi_router(), prefix="/api/users")
            install_error_handlers(app)
        """
        from ticketing_auth.integrations.fastapi.router import create_auth_router

        return create_auth_router(self._config, self._get_db)

    # ------ Migrations ------

    async def migrate(self) -> None:
        """Run pending database migrations. Safe to call on every startup.

        Tracks state in the ``ticketing_auth_alembic_version`` table (separate
        from any application Alembic setup).
        """
        from ticketing_auth.migrations import migration_config, run_upgrade

        config = migration_config()
        async with self._engine.begin() as conn:
            await conn.run_sync(run_upgrade, config)

    # ------ Lifecycle ------

    async def dispose(self) -> None:
        """Dispose the database engine (for clean shutdown)."""
        await self._engine.dispose()
