"""create_accounts

Create the accounts table used by provider sign-in. Contact address, handle
and provider user id are each unique under a named constraint that the
application maps back to a sign-in error.

Revision ID: 3c1d2e7f9a10
Revises:
Create Date: 2026-10-19 09:12:44.512031

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d2e7f9a10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE access_level AS ENUM ('user', 'editor', 'admin');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("contact_address", sa.String(255), nullable=False),
        sa.Column("handle", sa.String(50), nullable=False),
        sa.Column("provider_user_id", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "access_level",
            postgresql.ENUM(
                "user", "editor", "admin", name="access_level", create_type=False
            ),
            nullable=False,
            server_default="user",
        ),
        sa.Column("last_login_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("contact_address", name="uq_accounts_contact_address"),
        sa.UniqueConstraint("handle", name="uq_accounts_handle"),
        sa.UniqueConstraint("provider_user_id", name="uq_accounts_provider_user_id"),
    )
    op.create_index("idx_accounts_access_level", "accounts", ["access_level"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_accounts_access_level", table_name="accounts")
    op.drop_table("accounts")
    op.execute("DROP TYPE IF EXISTS access_level")
