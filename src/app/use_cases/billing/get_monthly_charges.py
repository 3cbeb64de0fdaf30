"""GetMonthlyCharges Use Case

Reads the monthly charge ledger row of a client.
"""

from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.clock import Clock
from src.app.repositories.monthly_charge_ledger_repository import MonthlyChargeLedgerRepository
from .dtos import MonthlyChargesResponseDTO
from .mappers import to_charges_dto
from .period import resolve_period


class GetMonthlyCharges:

    def __init__(self, ledger_repo: MonthlyChargeLedgerRepository, clock: Clock):
        self.ledger_repo = ledger_repo
        self.clock = clock

    async def execute(
        self,
        client_id: str,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Result[MonthlyChargesResponseDTO]:
        try:
            month, year = resolve_period(self.clock.now(), month, year)
            ledger = await self.ledger_repo.get_for_period(client_id, month, year)

            if not ledger:
                return Return.err(
                    Error(
                        code="CHARGES_NOT_FOUND",
                        message=f"No charges for client {client_id} in {month:02d}/{year}",
                        reason="Ledger row not created yet",
                    )
                )

            return Return.ok(to_charges_dto(ledger))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_CHARGES_FAILED",
                    message="Failed to retrieve monthly charges",
                    reason=str(e),
                )
            )
