"""SQLAlchemy implementation of ClientRepository"""

from typing import Dict, List, Optional
from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):
    """
    SQLAlchemy implementation of ClientRepository

    Features:
    - Prefix scans over client codes (LIKE)
    - Country-scoped workload counts grouped by sales owner
    - Single-statement field updates
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_id: str) -> Optional[Client]:
        stmt = select(Client).where(Client.id == client_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_codes_like(self, pattern: str) -> List[str]:
        stmt = select(Client.client_code).where(Client.client_code.like(pattern))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_sales_owner(self, country: str, sales_owner_ids: List[str]) -> Dict[str, int]:
        """
        Count clients per sales owner within one country

        Args:
            country: Country code the workload is scoped to
            sales_owner_ids: Owners to count for

        Returns:
            Mapping owner id -> client count, owners without clients absent
        """
        if not sales_owner_ids:
            return {}

        stmt = (
            select(Client.sales_owner_id, func.count(Client.id))
            .where(
                Client.country == country,
                Client.sales_owner_id.in_(sales_owner_ids),
            )
            .group_by(Client.sales_owner_id)
        )
        result = await self.session.execute(stmt)
        return {owner_id: count for owner_id, count in result.all()}

    async def update_sales_owner(self, client_id: str, sales_owner_id: str) -> bool:
        stmt = (
            update(Client)
            .where(Client.id == client_id)
            .values(sales_owner_id=sales_owner_id)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def update_client_code(self, client_id: str, client_code: str) -> bool:
        """
        Store the client account code

        Raises:
            IntegrityError: If another client already holds the code
        """
        stmt = (
            update(Client)
            .where(Client.id == client_id)
            .values(client_code=client_code)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
