"""Warehouse Capacity Domain Entity

Current stored volume per client. Mutated by warehouse receive/ship
operations; read-only to the billing core.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, ForeignKey, Numeric, String
from src.domain.base import BaseModel, IdType


class WarehouseCapacity(BaseModel, table=True):
    """
    Warehouse Capacity - Stored volume for one client

    Domain Rules:
    - One row per client
    - limit_cbm overrides the client/plan limit when set
    """

    __tablename__ = "warehouse_capacities"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique capacity identifier (auto-increment)"
    )

    client_id: str = Field(
        sa_column=Column(String, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, unique=True),
        description="Client this capacity belongs to"
    )

    used_cbm: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Currently stored volume in m³"
    )

    limit_cbm: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Storage limit override in m³"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Last warehouse movement timestamp"
    )
