"""PostgreSQL repository implementations."""

from wire.persistence.repository.account import PostgresAccountRepository

__all__ = [
    "PostgresAccountRepository",
]
