"""SQLAlchemy table definitions for RazeWire accounts.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Enum,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from wire.domain.repository.account import (
    CONTACT_ADDRESS_CONSTRAINT,
    HANDLE_CONSTRAINT,
    PROVIDER_USER_ID_CONSTRAINT,
)

metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("contact_address", String(255), nullable=False),  # Lower-cased email
    Column("handle", String(50), nullable=False),
    Column("provider_user_id", String(255), nullable=True),  # Google `sub`
    Column("avatar_url", Text, nullable=True),
    Column(
        "access_level",
        Enum("user", "editor", "admin", name="access_level", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("contact_address", name=CONTACT_ADDRESS_CONSTRAINT),
    UniqueConstraint("handle", name=HANDLE_CONSTRAINT),
    UniqueConstraint("provider_user_id", name=PROVIDER_USER_ID_CONSTRAINT),
)

Index("idx_accounts_access_level", accounts_table.c.access_level)
