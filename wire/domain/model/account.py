"""Account aggregate root.

Readers and newsroom staff sign in through an identity provider; the
account is matched across providers by its contact address.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from wire.domain.model.common import DomainModel
from wire.domain.value import AccessLevel, AccountId, ContactAddress, Handle


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(DomainModel):
    """Local account.

    `provider_user_id` and `avatar_url` are backfilled on later sign-ins
    and never cleared by the sign-in flow.
    """

    id: AccountId
    contact_address: ContactAddress
    handle: Handle
    provider_user_id: Optional[str] = None
    avatar_url: Optional[str] = None
    access_level: AccessLevel = AccessLevel.USER
    last_login_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
