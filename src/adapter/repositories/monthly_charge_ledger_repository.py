"""SQLAlchemy implementation of MonthlyChargeLedgerRepository

Writes are INSERT ... ON CONFLICT (client_id, month, year) DO UPDATE
statements. The update clauses derive total_amount from the columns as
stored at write time, so an over-capacity recompute and a service charge
hitting the same row concurrently cannot lose each other's contribution.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.monthly_charge_ledger_repository import MonthlyChargeLedgerRepository
from src.domain.monthly_charge_ledger import MonthlyChargeLedger
from .upsert import insert_for

PERIOD_KEY = ["client_id", "month", "year"]


class SqlAlchemyMonthlyChargeLedgerRepository(MonthlyChargeLedgerRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_for_period(self, client_id: str, month: int, year: int) -> Optional[MonthlyChargeLedger]:
        stmt = (
            select(MonthlyChargeLedger)
            .where(
                MonthlyChargeLedger.client_id == client_id,
                MonthlyChargeLedger.month == month,
                MonthlyChargeLedger.year == year,
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

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
        Replace the over-capacity charge of a ledger row

        Args:
            over_space_amount: Authoritative charge for the open period
            period_start: Period start to record, None to close the period
            now: Write timestamp
        """
        table = MonthlyChargeLedger.__table__
        stmt = insert_for(self.session, table).values(
            client_id=client_id,
            month=month,
            year=year,
            over_space_amount=over_space_amount,
            additional_services_amount=Decimal("0"),
            total_amount=over_space_amount,
            over_space_charged_at=period_start,
            created_at=now,
            updated_at=now,
        )

        if period_start is None:
            charged_at = None
        else:
            # An open period keeps its original start
            charged_at = func.coalesce(
                table.c.over_space_charged_at, stmt.excluded.over_space_charged_at
            )

        stmt = stmt.on_conflict_do_update(
            index_elements=PERIOD_KEY,
            set_={
                "over_space_amount": stmt.excluded.over_space_amount,
                "total_amount": stmt.excluded.over_space_amount + table.c.additional_services_amount,
                "over_space_charged_at": charged_at,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        return await self.get_for_period(client_id, month, year)

    async def add_service_amount(
        self,
        client_id: str,
        month: int,
        year: int,
        amount: Decimal,
        now: datetime,
    ) -> MonthlyChargeLedger:
        """
        Accumulate a one-off service charge

        over_space_amount and over_space_charged_at are never touched.
        """
        table = MonthlyChargeLedger.__table__
        stmt = insert_for(self.session, table).values(
            client_id=client_id,
            month=month,
            year=year,
            over_space_amount=Decimal("0"),
            additional_services_amount=amount,
            total_amount=amount,
            over_space_charged_at=None,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=PERIOD_KEY,
            set_={
                "additional_services_amount": (
                    table.c.additional_services_amount + stmt.excluded.additional_services_amount
                ),
                "total_amount": (
                    table.c.over_space_amount
                    + table.c.additional_services_amount
                    + stmt.excluded.additional_services_amount
                ),
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        return await self.get_for_period(client_id, month, year)
