"""Clock Interface

All temporal billing decisions read "now" through a Clock so that period
elapse can be simulated.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Current time as naive UTC"""
        pass
