"""Bundled Alembic migrations, run programmatically on a provided connection."""

from pathlib import Path

from alembic.config import Config

VERSION_TABLE = "ticketing_auth_alembic_version"


def migration_config() -> Config:
    """Alembic config pointing at the bundled script directory."""
    config = Config()
    config.set_main_option("script_location", str(Path(__file__).resolve().parent))
    return config


def run_upgrade(connection, config: Config, revision: str = "head") -> None:
    """Upgrade on a sync connection (use via ``AsyncConnection.run_sync``)."""
    from alembic import command

    config.attributes["connection"] = connection
    command.upgrade(config, revision)
