"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from wire.domain.model import Account
from wire.domain.value import AccessLevel, AccountId, ContactAddress, Handle


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        contact_address=ContactAddress(row["contact_address"]),
        handle=Handle(row["handle"]),
        provider_user_id=row.get("provider_user_id"),
        avatar_url=row.get("avatar_url"),
        access_level=AccessLevel(row["access_level"]),
        last_login_at=row.get("last_login_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": account.id,
        "contact_address": account.contact_address.root,
        "handle": account.handle.root,
        "provider_user_id": account.provider_user_id,
        "avatar_url": account.avatar_url,
        "access_level": account.access_level.value,
        "last_login_at": account.last_login_at,
        "created_at": account.created_at,
        "updated_at": account.updated_at,
    }
