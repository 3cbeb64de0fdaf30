"""RecomputeOverspaceCharge Use Case

Recomputes the recurring over-capacity charge of a client for one billing
month whenever its stored volume changes.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.capacity_repository import CapacityRepository
from src.app.repositories.monthly_charge_ledger_repository import MonthlyChargeLedgerRepository
from src.domain.capacity_snapshot import calculate_weekly_overspace_charge
from .dtos import RecomputeOverspaceCommandDTO, OverspaceRecomputeResponseDTO
from .mappers import to_charges_dto
from .period import resolve_period

logger = logging.getLogger(__name__)


class RecomputeOverspaceCharge:
    """
    Use Case: Recompute weekly pro-rata over-capacity charge

    Business Rules:
    1. effective limit = base limit + buffer
    2. Usage at or below the effective limit: charge 0, open period is closed
    3. Usage above: charge = overage * rate * started weeks since period start,
       at least one week
    4. over_space_amount is replaced, never summed with the previous value
    5. over_space_charged_at is set when a period opens and kept while it stays open
    6. additional_services_amount is left untouched

    Flow:
    1. Resolve billing period (defaults to current month)
    2. Load capacity snapshot
    3. Read the open period start from the ledger row (if any)
    4. Calculate charge
    5. Upsert ledger row atomically
    6. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        capacity_repo: CapacityRepository,
        ledger_repo: MonthlyChargeLedgerRepository,
        clock: Clock,
        default_rate: Decimal,
    ):
        self.uow = uow
        self.capacity_repo = capacity_repo
        self.ledger_repo = ledger_repo
        self.clock = clock
        self.default_rate = Decimal(str(default_rate))

    async def execute(self, command: RecomputeOverspaceCommandDTO) -> Result[OverspaceRecomputeResponseDTO]:
        """
        Execute over-capacity recompute

        Args:
            command: RecomputeOverspaceCommandDTO with client_id and optional month/year

        Returns:
            Result[OverspaceRecomputeResponseDTO]: Ledger row and charge figures or error
        """
        try:
            now = self.clock.now()
            month, year = resolve_period(now, command.month, command.year)

            snapshot = await self.capacity_repo.get_snapshot(command.client_id, self.default_rate)

            if not snapshot:
                logger.error(f"[overspace] Client {command.client_id} not found")
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                        reason="Client does not exist",
                    )
                )

            existing = await self.ledger_repo.get_for_period(command.client_id, month, year)
            open_period_start = existing.over_space_charged_at if existing else None

            charge = calculate_weekly_overspace_charge(snapshot, open_period_start, now)

            ledger = await self.ledger_repo.upsert_over_space(
                client_id=command.client_id,
                month=month,
                year=year,
                over_space_amount=charge.amount,
                period_start=charge.period_start,
                now=now,
            )

            await self.uow.commit()

            if open_period_start and charge.period_start is None:
                logger.info(
                    f"[overspace] Client {command.client_id} back within limit, "
                    f"period opened {open_period_start.isoformat()} closed"
                )
            elif open_period_start is None and charge.period_start is not None:
                logger.info(
                    f"[overspace] Client {command.client_id} over limit by {charge.overage_cbm} m³, "
                    f"period opened for {month:02d}/{year}"
                )

            return Return.ok(
                OverspaceRecomputeResponseDTO(
                    charges=to_charges_dto(ledger),
                    used_cbm=snapshot.used_cbm,
                    effective_limit_cbm=snapshot.effective_limit_cbm,
                    overage_cbm=charge.overage_cbm,
                    rate_per_cbm_per_week=snapshot.rate_per_cbm_per_week,
                    weeks_charged=charge.weeks_charged,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"[overspace] Recompute failed for client {command.client_id}: {e}")
            return Return.err(
                Error(
                    code="RECOMPUTE_OVERSPACE_FAILED",
                    message="Failed to recompute over-space charge",
                    reason=str(e),
                )
            )
