"""SQLAlchemy implementation of CapacityRepository

Resolves the effective storage terms of a client from its warehouse
capacity row, its individual overrides and its subscription plan.
"""

from decimal import Decimal
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.capacity_repository import CapacityRepository
from src.domain.capacity_snapshot import CapacitySnapshot
from src.domain.client import Client
from src.domain.plan import Plan
from src.domain.warehouse_capacity import WarehouseCapacity


def _first_set(*values: Optional[Decimal]) -> Optional[Decimal]:
    for value in values:
        if value is not None:
            return value
    return None


class SqlAlchemyCapacityRepository(CapacityRepository):
    """
    SQLAlchemy implementation of CapacityRepository

    Resolution order:
    - used: capacity.used_cbm, 0 without a capacity row
    - base limit: capacity.limit_cbm, client.limit_cbm, plan.space_limit_cbm, 0
    - buffer: plan.buffer_cbm, 0
    - rate: plan.over_space_rate_per_week, client.individual_over_space_rate, default
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_snapshot(self, client_id: str, default_rate: Decimal) -> Optional[CapacitySnapshot]:
        stmt = (
            select(Client, Plan, WarehouseCapacity)
            .outerjoin(Plan, Plan.id == Client.plan_id)
            .outerjoin(WarehouseCapacity, WarehouseCapacity.client_id == Client.id)
            .where(Client.id == client_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        row = result.first()

        if row is None:
            return None

        client, plan, capacity = row

        used_cbm = capacity.used_cbm if capacity else None
        base_limit_cbm = _first_set(
            capacity.limit_cbm if capacity else None,
            client.limit_cbm,
            plan.space_limit_cbm if plan else None,
        )
        buffer_cbm = plan.buffer_cbm if plan else None
        rate = _first_set(
            plan.over_space_rate_per_week if plan else None,
            client.individual_over_space_rate,
            default_rate,
        )

        return CapacitySnapshot(
            client_id=client.id,
            used_cbm=Decimal(used_cbm or 0),
            base_limit_cbm=Decimal(base_limit_cbm or 0),
            buffer_cbm=Decimal(buffer_cbm or 0),
            rate_per_cbm_per_week=Decimal(rate),
        )

    async def list_client_ids(self) -> List[str]:
        stmt = select(WarehouseCapacity.client_id).order_by(WarehouseCapacity.client_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
