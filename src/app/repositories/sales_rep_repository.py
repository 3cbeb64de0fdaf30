"""Sales Representative Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.user import User, UserRole


class SalesRepRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def list_by_roles(self, roles: List[UserRole]) -> List[User]:
        """
        List users holding any of the roles

        Returns:
            Users ordered by created_at, then id (earliest registered first)
        """
        pass
