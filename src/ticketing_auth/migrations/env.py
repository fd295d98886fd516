"""Programmatic Alembic environment for the bundled migrations.

Never run directly; Alembic's runtime invokes it when TicketingAuth.migrate()
or ``ticketing-auth migrate`` calls alembic.command.upgrade().

The sync connection is passed via config.attributes["connection"].
"""

from alembic import context

from ticketing_auth.migrations import VERSION_TABLE

config = context.config


def run_migrations_online() -> None:
    """Run migrations using a pre-provided connection."""
    connection = config.attributes.get("connection")
    if connection is None:
        raise RuntimeError(
            "No connection provided. Use auth.migrate() to run migrations."
        )

    context.configure(
        connection=connection,
        target_metadata=None,
        version_table=VERSION_TABLE,
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


run_migrations_online()
