"""SQLAlchemy implementation of SalesRepRepository"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.sales_rep_repository import SalesRepRepository
from src.domain.user import User, UserRole


class SqlAlchemySalesRepRepository(SalesRepRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_roles(self, roles: List[UserRole]) -> List[User]:
        """
        List users holding any of the roles

        Returns:
            Users ordered by registration (earliest first), id as second key
        """
        stmt = (
            select(User)
            .where(User.role.in_(roles))
            .order_by(User.created_at, User.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
