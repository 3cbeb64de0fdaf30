"""Over-space Recalculation Background Worker

Periodically recomputes over-capacity charges of all clients. Capacity
events recompute a single client as they happen; this worker closes periods
and advances week counts for clients without recent warehouse movements.
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from decimal import Decimal
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import SqlAlchemyCapacityRepository, SqlAlchemyMonthlyChargeLedgerRepository
from src.adapter.services.clock import SystemClock
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.clock import Clock
from src.app.use_cases.billing import (
    BatchRecomputeResultDTO,
    RecomputeOverspaceCharge,
    RecomputeOverspaceCharges,
)

logger = logging.getLogger(__name__)


class OverspaceRecalculatorWorker:
    """
    Background worker for over-space charge recalculation

    Features:
    - Recomputes every client holding warehouse capacity
    - Logs clients whose recompute failed
    - Can run once or continuously
    - Configurable interval (default: daily)

    Usage:
        # Run once
        worker = OverspaceRecalculatorWorker()
        result = await worker.run_once()

        # Run continuously
        worker = OverspaceRecalculatorWorker()
        await worker.run_forever(interval_seconds=86400)  # Daily
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            clock: Time source (defaults to the system clock)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.clock = clock or SystemClock()

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info("OverspaceRecalculatorWorker initialized")

    async def run_once(self) -> BatchRecomputeResultDTO:
        """
        Recompute all clients once

        Returns:
            BatchRecomputeResultDTO with recompute results
        """
        if not ApplicationConfig.OVERSPACE_RECALCULATION_ENABLED:
            logger.info("Over-space recalculation is disabled, skipping")
            now = self.clock.now()
            return BatchRecomputeResultDTO(
                month=now.month,
                year=now.year,
                total_clients=0,
                recomputed=0,
                open_periods=0,
                failures=[],
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            capacity_repo = SqlAlchemyCapacityRepository(session)

            use_case = RecomputeOverspaceCharges(
                capacity_repo=capacity_repo,
                recompute=RecomputeOverspaceCharge(
                    uow=SqlAlchemyUnitOfWork(session),
                    capacity_repo=capacity_repo,
                    ledger_repo=SqlAlchemyMonthlyChargeLedgerRepository(session),
                    clock=self.clock,
                    default_rate=Decimal(str(ApplicationConfig.OVERSPACE_RATE_PER_CBM_PER_WEEK)),
                ),
                clock=self.clock,
            )

            result = await use_case.execute()

            if result.is_err():
                logger.error(f"Over-space recalculation failed: {result.error.message}")
                raise RuntimeError(f"Over-space recalculation failed: {result.error.message}")

            response = result.value

            for failure in response.failures:
                logger.error(
                    f"  - Client {failure.client_id}: {failure.code} {failure.message}"
                )

            return response

    async def run_forever(self, interval_seconds: int = 86400):
        """
        Run recalculation continuously at specified interval

        Args:
            interval_seconds: Seconds between runs (default: 24 hours)
        """
        logger.info(
            f"Starting continuous over-space recalculation with {interval_seconds}s interval"
        )

        while True:
            try:
                result = await self.run_once()
                logger.info(
                    f"Recalculation cycle complete for {result.month:02d}/{result.year}. "
                    f"Recomputed {result.recomputed}/{result.total_clients} clients, "
                    f"{result.open_periods} over capacity, "
                    f"{len(result.failures)} failures in {result.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Recalculation cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("OverspaceRecalculatorWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        # Run once
        python -m src.worker.overspace_recalculator --once

        # Run continuously (default: daily)
        python -m src.worker.overspace_recalculator

        # Run continuously with custom interval (in seconds)
        python -m src.worker.overspace_recalculator --interval 3600
    """
    import argparse

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Over-space Recalculation Worker")
    parser.add_argument(
        "--once", action="store_true", help="Run once and exit"
    )
    parser.add_argument(
        "--interval", type=int,
        default=ApplicationConfig.OVERSPACE_RECALCULATION_INTERVAL_SECONDS,
        help="Interval between runs in seconds (default: 86400 = 24 hours)"
    )
    args = parser.parse_args()

    worker = OverspaceRecalculatorWorker()

    try:
        if args.once:
            result = await worker.run_once()
            print(f"Recalculation complete at {worker.clock.now().isoformat()}:")
            print(f"  Period: {result.month:02d}/{result.year}")
            print(f"  Clients recomputed: {result.recomputed}/{result.total_clients}")
            print(f"  Over capacity: {result.open_periods}")
            print(f"  Execution time: {result.execution_time_ms}ms")
            if result.failures:
                print("\nFailures:")
                for failure in result.failures:
                    print(f"  - Client {failure.client_id}: {failure.code} {failure.message}")
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
