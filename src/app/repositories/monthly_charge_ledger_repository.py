"""Monthly Charge Ledger Repository Interface

Both write operations are single-statement upserts keyed by
(client_id, month, year), so concurrent over-capacity recomputes and
service charges converge on total = over_space + services.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional
from src.domain.monthly_charge_ledger import MonthlyChargeLedger


class MonthlyChargeLedgerRepository(ABC):

    @abstractmethod
    async def get_for_period(self, client_id: str, month: int, year: int) -> Optional[MonthlyChargeLedger]:
        """
        Retrieve the ledger row of a client for one month

        Returns:
            MonthlyChargeLedger if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert_over_space(
        self,
        client_id: str,
        month: int,
        year: int,
        over_space_amount: Decimal,
        period_start: Optional[datetime],
        now: datetime,
    ) -> MonthlyChargeLedger:
        """
        Replace the over-capacity charge

        over_space_amount overwrites the stored value and total_amount is
        recomputed from the stored additional_services_amount. A None
        period_start clears over_space_charged_at; otherwise an already
        open period keeps its original start.

        Returns:
            The ledger row after the write
        """
        pass

    @abstractmethod
    async def add_service_amount(
        self,
        client_id: str,
        month: int,
        year: int,
        amount: Decimal,
        now: datetime,
    ) -> MonthlyChargeLedger:
        """
        Add to additional_services_amount and total_amount

        A missing row is created with over_space_amount = 0.

        Returns:
            The ledger row after the write
        """
        pass
