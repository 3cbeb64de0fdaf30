"""SQLAlchemy implementation of ClientCodeSequenceRepository

Counters are advanced with a single UPDATE ... RETURNING statement, so two
concurrent allocations for the same (prefix, country) never observe the
same value.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_code_sequence_repository import ClientCodeSequenceRepository
from src.domain.client_code_sequence import ClientCodeSequence
from .upsert import insert_for


class SqlAlchemyClientCodeSequenceRepository(ClientCodeSequenceRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists(self, prefix: str, country: str) -> bool:
        stmt = select(ClientCodeSequence.id).where(
            ClientCodeSequence.prefix == prefix,
            ClientCodeSequence.country == country,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def seed(self, prefix: str, country: str, last_value: int, now: datetime) -> None:
        """
        Create the counter unless it already exists

        Args:
            prefix: Sales rep prefix
            country: Country code
            last_value: Highest suffix already in use
            now: Creation timestamp
        """
        stmt = insert_for(self.session, ClientCodeSequence.__table__).values(
            prefix=prefix,
            country=country,
            last_value=last_value,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_nothing(index_elements=["prefix", "country"])
        await self.session.execute(stmt)

    async def next_value(self, prefix: str, country: str, now: datetime) -> Optional[int]:
        table = ClientCodeSequence.__table__
        stmt = (
            update(table)
            .where(table.c.prefix == prefix, table.c.country == country)
            .values(last_value=table.c.last_value + 1, updated_at=now)
            .returning(table.c.last_value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
