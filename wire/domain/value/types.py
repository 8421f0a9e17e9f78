"""Domain value objects for RazeWire accounts.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalisation.
"""

import re
from enum import Enum

from pydantic import field_validator

from wire.domain.value.common import RootValueObject, ValueObject

HANDLE_MAX_LENGTH = 50

_CONTACT_ADDRESS_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AuthProvider(str, Enum):
    """Supported identity providers."""

    GOOGLE = "google"


class AccessLevel(str, Enum):
    """Privilege tier of an account.

    EDITOR can manage content in the newsroom dashboard but, like USER,
    cannot change anyone's access level. Only ADMIN is elevated.
    """

    USER = "user"
    EDITOR = "editor"
    ADMIN = "admin"

    @property
    def is_elevated(self) -> bool:
        return self is AccessLevel.ADMIN


class ContactAddress(RootValueObject[str]):
    """Verified email address used as the cross-provider match key.

    Stored trimmed and lower-cased so that lookups are exact matches.
    """

    @field_validator("root")
    @classmethod
    def normalize_address(cls, v: str) -> str:
        """Normalise and validate the address."""
        v = v.strip().lower()
        if len(v) > 255 or not _CONTACT_ADDRESS_PATTERN.match(v):
            raise ValueError(f"Invalid email address: {v!r}")
        return v

    @property
    def local_part(self) -> str:
        return self.root.split("@", 1)[0]


class Handle(RootValueObject[str]):
    """Unique, human-readable account handle."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > HANDLE_MAX_LENGTH:
            raise ValueError(f"Handle must be 1-{HANDLE_MAX_LENGTH} characters")
        return v


class ProviderProfile(ValueObject):
    """Typed view of an identity provider's callback payload.

    Produced by the credential validator; everything downstream of it works
    on this shape instead of the raw provider dictionary.
    """

    provider: AuthProvider
    provider_user_id: str  # Permanent, provider-scoped ID (Google `sub`)
    contact_address: ContactAddress
    display_name: str | None = None
    avatar_url: str | None = None
