"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wire.domain.model import Account
from wire.domain.repository import AccountRepository
from wire.domain.value import AccountId, ContactAddress, Handle
from wire.persistence.mappers import account_to_dict, row_to_account
from wire.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository.

    Uniqueness is enforced by the named constraints on the accounts table;
    asyncpg reports the constraint name on the driver error.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[Account]:
        stmt = select(accounts_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        return await self._find_one(accounts_table.c.id == account_id)

    async def find_by_contact_address(
        self, contact_address: ContactAddress
    ) -> Optional[Account]:
        return await self._find_one(
            accounts_table.c.contact_address == contact_address.root
        )

    async def find_by_handle(self, handle: Handle) -> Optional[Account]:
        return await self._find_one(accounts_table.c.handle == handle.root)

    async def create(self, account: Account) -> Account:
        """Insert a new account.

        The insert runs in a SAVEPOINT so a constraint violation leaves the
        request's transaction usable.

        Raises:
            IntegrityError: If a uniqueness constraint is violated
        """
        async with self.session.begin_nested():
            stmt = accounts_table.insert().values(**account_to_dict(account))
            await self.session.execute(stmt)
        return account

    async def save(self, account: Account) -> Account:
        """Update an existing account row.

        Like create, runs in a SAVEPOINT: a handle change can collide.

        Raises:
            IntegrityError: If a uniqueness constraint is violated
        """
        values = account_to_dict(account)
        values.pop("id")
        values.pop("created_at")
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account.id)
            .values(**values)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return account
