"""RecomputeOverspaceCharges Use Case

Recomputes the over-capacity charge of every client holding warehouse
capacity. Closes periods of clients whose volume dropped without a
capacity event and advances week counts of long-running periods.
"""

import logging
import time
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.clock import Clock
from src.app.repositories.capacity_repository import CapacityRepository
from .recompute_overspace_charge import RecomputeOverspaceCharge
from .dtos import BatchRecomputeResultDTO, RecomputeFailureDTO, RecomputeOverspaceCommandDTO
from .period import resolve_period

logger = logging.getLogger(__name__)


class RecomputeOverspaceCharges:
    """
    Use Case: Recompute over-capacity charges for all clients

    Business Rules:
    1. Every client with a capacity row is recomputed for the same period
    2. A failing client is reported and does not stop the run
    """

    def __init__(
        self,
        capacity_repo: CapacityRepository,
        recompute: RecomputeOverspaceCharge,
        clock: Clock,
    ):
        self.capacity_repo = capacity_repo
        self.recompute = recompute
        self.clock = clock

    async def execute(
        self,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Result[BatchRecomputeResultDTO]:
        started = time.monotonic()

        try:
            month, year = resolve_period(self.clock.now(), month, year)
            client_ids = await self.capacity_repo.list_client_ids()
        except Exception as e:
            logger.error(f"[overspace] Could not list clients for recompute: {e}")
            return Return.err(
                Error(
                    code="LIST_CLIENTS_FAILED",
                    message="Failed to list clients for over-space recompute",
                    reason=str(e),
                )
            )

        logger.info(f"[overspace] Recomputing {len(client_ids)} clients for {month:02d}/{year}")

        recomputed = 0
        open_periods = 0
        failures = []

        for client_id in client_ids:
            result = await self.recompute.execute(
                RecomputeOverspaceCommandDTO(client_id=client_id, month=month, year=year)
            )

            if result.is_err():
                failures.append(
                    RecomputeFailureDTO(
                        client_id=client_id,
                        code=result.error.code,
                        message=result.error.message,
                    )
                )
                continue

            recomputed += 1
            if result.value.charges.over_space_charged_at is not None:
                open_periods += 1

        return Return.ok(
            BatchRecomputeResultDTO(
                month=month,
                year=year,
                total_clients=len(client_ids),
                recomputed=recomputed,
                open_periods=open_periods,
                failures=failures,
                execution_time_ms=int((time.monotonic() - started) * 1000),
            )
        )
