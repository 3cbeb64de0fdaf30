"""Client Code Sequence Repository Interface

Atomic per-(prefix, country) counter behind client account codes.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class ClientCodeSequenceRepository(ABC):

    @abstractmethod
    async def exists(self, prefix: str, country: str) -> bool:
        pass

    @abstractmethod
    async def seed(self, prefix: str, country: str, last_value: int, now: datetime) -> None:
        """
        Create the counter if it does not exist yet

        A counter created concurrently by another caller is left untouched.
        """
        pass

    @abstractmethod
    async def next_value(self, prefix: str, country: str, now: datetime) -> Optional[int]:
        """
        Advance the counter by one in a single statement

        Returns:
            The new value, None if the counter does not exist
        """
        pass
