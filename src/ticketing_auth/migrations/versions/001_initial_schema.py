"""Initial schema — the ticketing_users table.

Revision ID: 001
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "ticketing_users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_ticketing_users_email", "ticketing_users", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_ticketing_users_email", table_name="ticketing_users")
    op.drop_table("ticketing_users")
