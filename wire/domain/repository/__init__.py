"""Repository interfaces for the RazeWire domain.

Interfaces are defined in the domain layer (dependency inversion);
implementations live in the persistence layer.
"""

from wire.domain.repository.account import AccountRepository

__all__ = ["AccountRepository"]
