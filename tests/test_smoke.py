"""Smoke tests — verify all modules import cleanly."""


def test_import_models():
    from ticketing_auth.models import User


def test_import_core():
    from ticketing_auth.core.auth import AuthError, check_password, signup
    from ticketing_auth.core.schemas import ErrorResponse, SignupRequest, UserResponse


def test_import_repositories():
    from ticketing_auth.repositories import user


def test_import_utils():
    from ticketing_auth.utils.passwords import (
        MalformedCredentialError,
        PasswordHashingError,
        hash_password,
        verify_password,
    )


def test_import_config():
    from ticketing_auth.config import PasswordHashConfig, PasswordPolicy, TicketingAuthConfig


def test_import_ticketing_auth():
    from ticketing_auth import TicketingAuth, __version__

    assert __version__


def test_import_db():
    from ticketing_auth.db import create_engine, create_session_factory, get_session


def test_import_fastapi_integration():
    from ticketing_auth.integrations.fastapi import create_auth_router, install_error_handlers


def test_import_migrations():
    from ticketing_auth.migrations import VERSION_TABLE, migration_config, run_upgrade

    assert VERSION_TABLE == "ticketing_auth_alembic_version"
    assert migration_config().get_main_option("script_location").endswith("migrations")


def test_import_cli():
    from ticketing_auth.cli import main
