"""Capacity Repository Interface

Read-only access to the storage position of clients.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional
from src.domain.capacity_snapshot import CapacitySnapshot


class CapacityRepository(ABC):

    @abstractmethod
    async def get_snapshot(self, client_id: str, default_rate: Decimal) -> Optional[CapacitySnapshot]:
        """
        Resolve the capacity snapshot of a client

        Args:
            client_id: Client identifier
            default_rate: Rate used when neither plan nor client defines one

        Returns:
            CapacitySnapshot if the client exists, None otherwise
        """
        pass

    @abstractmethod
    async def list_client_ids(self) -> List[str]:
        """List clients that have a warehouse capacity row"""
        pass
