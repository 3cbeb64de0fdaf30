"""Row builders for integration tests"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import select

from src.domain.client import Client
from src.domain.plan import Plan
from src.domain.user import User, UserRole
from src.domain.warehouse_capacity import WarehouseCapacity


async def add_user(
    session,
    name: Optional[str],
    email: str,
    created_at: datetime,
    role: UserRole = UserRole.ADMIN,
) -> User:
    user = User(name=name, email=email, role=role, created_at=created_at)
    session.add(user)
    await session.commit()
    return user


async def add_plan(
    session,
    name: str,
    space_limit_cbm: str,
    buffer_cbm: str = "0",
    rate: Optional[str] = None,
) -> Plan:
    plan = Plan(
        name=name,
        space_limit_cbm=Decimal(space_limit_cbm),
        buffer_cbm=Decimal(buffer_cbm),
        over_space_rate_per_week=Decimal(rate) if rate is not None else None,
    )
    session.add(plan)
    await session.commit()
    return plan


async def add_client(
    session,
    name: str,
    country: str,
    sales_owner_id: Optional[str] = None,
    client_code: Optional[str] = None,
    plan_id: Optional[int] = None,
) -> Client:
    client = Client(
        name=name,
        country=country,
        sales_owner_id=sales_owner_id,
        client_code=client_code,
        plan_id=plan_id,
    )
    session.add(client)
    await session.commit()
    return client


async def set_usage(session, client_id: str, used_cbm: str) -> WarehouseCapacity:
    """Create or update the capacity row of a client"""
    result = await session.execute(
        select(WarehouseCapacity).where(WarehouseCapacity.client_id == client_id)
    )
    capacity = result.scalar_one_or_none()
    if capacity is None:
        capacity = WarehouseCapacity(client_id=client_id)
        session.add(capacity)

    capacity.used_cbm = Decimal(used_cbm)
    capacity.updated_at = datetime.utcnow()

    await session.commit()
    return capacity
