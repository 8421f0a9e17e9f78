"""Domain value objects for RazeWire accounts."""

from wire.domain.value.identifiers import AccountId
from wire.domain.value.types import (
    AccessLevel,
    AuthProvider,
    ContactAddress,
    Handle,
    ProviderProfile,
)

__all__ = [
    # Identifiers
    "AccountId",
    # Types
    "AccessLevel",
    "AuthProvider",
    "ContactAddress",
    "Handle",
    "ProviderProfile",
]
