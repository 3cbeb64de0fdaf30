"""AddServiceCharge Use Case

Adds a one-off service charge (e.g. local collection fee) to the monthly
charge ledger of a client.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.monthly_charge_ledger_repository import MonthlyChargeLedgerRepository
from .dtos import AddServiceChargeCommandDTO, MonthlyChargesResponseDTO
from .mappers import to_charges_dto
from .period import resolve_period

logger = logging.getLogger(__name__)


class AddServiceCharge:
    """
    Use Case: Add one-off service charge

    Business Rules:
    1. Purely additive: additional_services_amount and total_amount grow by amount
    2. Over-capacity fields are never touched
    3. Missing ledger row is created with over_space_amount = 0
    4. No deduplication, invocation must be idempotent on the caller side
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        ledger_repo: MonthlyChargeLedgerRepository,
        clock: Clock,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.ledger_repo = ledger_repo
        self.clock = clock

    async def execute(self, command: AddServiceChargeCommandDTO) -> Result[MonthlyChargesResponseDTO]:
        try:
            now = self.clock.now()
            month, year = resolve_period(now, command.month, command.year)

            client = await self.client_repo.get_by_id(command.client_id)
            if not client:
                logger.error(f"[service-charge] Client {command.client_id} not found")
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                        reason="Client does not exist",
                    )
                )

            ledger = await self.ledger_repo.add_service_amount(
                client_id=command.client_id,
                month=month,
                year=year,
                amount=command.amount,
                now=now,
            )

            await self.uow.commit()

            logger.info(
                f"[service-charge] Added {command.amount} to client {command.client_id} "
                f"for {month:02d}/{year}, services total {ledger.additional_services_amount}"
            )

            return Return.ok(to_charges_dto(ledger))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"[service-charge] Failed for client {command.client_id}: {e}")
            return Return.err(
                Error(
                    code="ADD_SERVICE_CHARGE_FAILED",
                    message="Failed to add service charge",
                    reason=str(e),
                )
            )
