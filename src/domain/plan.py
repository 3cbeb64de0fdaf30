"""Subscription Plan Domain Entity

Storage allowances and over-capacity pricing. Owned by plan administration,
read-only to the billing core.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, Numeric, String
from src.domain.base import BaseModel, IdType


class Plan(BaseModel, table=True):
    """
    Plan - Subscription plan storage terms

    Domain Rules:
    - space_limit_cbm is the base storage limit
    - buffer_cbm is free space above the base limit (e.g. 5 m³ on Professional)
    - over_space_rate_per_week is charged per m³ above limit + buffer,
      per started week (None = use the platform default rate)
    """

    __tablename__ = "plans"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique plan identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False, unique=True),
        description="Plan name"
    )

    space_limit_cbm: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Base storage limit in m³"
    )

    buffer_cbm: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Free buffer above the base limit in m³"
    )

    over_space_rate_per_week: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Charge per m³ over the effective limit per started week"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Plan creation timestamp"
    )
