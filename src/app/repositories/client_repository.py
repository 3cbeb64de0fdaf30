"""Client Repository Interface

Defines the contract for client persistence operations used by
code allocation and sales assignment.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from src.domain.client import Client


class ClientRepository(ABC):

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Optional[Client]:
        """
        Retrieve client by ID

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_codes_like(self, pattern: str) -> List[str]:
        """
        List client codes matching a LIKE pattern

        Args:
            pattern: SQL LIKE pattern (e.g., "JD-DE-%")
        """
        pass

    @abstractmethod
    async def count_by_sales_owner(self, country: str, sales_owner_ids: List[str]) -> Dict[str, int]:
        """
        Count clients per sales owner within one country

        Args:
            country: Country code the workload is scoped to
            sales_owner_ids: Owners to count for

        Returns:
            Mapping owner id -> client count (owners without clients may be absent)
        """
        pass

    @abstractmethod
    async def update_sales_owner(self, client_id: str, sales_owner_id: str) -> bool:
        """
        Assign the client to a sales owner

        Returns:
            True if a client row was updated
        """
        pass

    @abstractmethod
    async def update_client_code(self, client_id: str, client_code: str) -> bool:
        """
        Store the client account code

        Returns:
            True if a client row was updated

        Raises:
            IntegrityError: If the code is already used by another client
        """
        pass
