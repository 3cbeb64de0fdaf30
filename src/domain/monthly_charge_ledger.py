"""Monthly Charge Ledger Domain Entity

Per-client, per-calendar-month accounting record combining the recurring
over-capacity charge with one-off service charges.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Numeric, String, UniqueConstraint
from src.domain.base import BaseModel, IdType


class MonthlyChargeLedger(BaseModel, table=True):
    """
    Monthly Charge Ledger - One row per (client, month, year)

    Domain Rules:
    - total_amount = over_space_amount + additional_services_amount
    - over_space_amount is recomputed and replaced on every capacity change
    - additional_services_amount only ever accumulates
    - over_space_charged_at marks the start of the current continuous
      over-capacity period (None when usage is within the effective limit)
    - Created lazily on the first chargeable event, never deleted
    """

    __tablename__ = "monthly_charge_ledgers"
    __table_args__ = (
        UniqueConstraint('client_id', 'month', 'year', name='uq_monthly_charge_ledgers_period'),
        CheckConstraint('month >= 1 AND month <= 12', name='month_in_range'),
        CheckConstraint('over_space_amount >= 0', name='over_space_amount_non_negative'),
        CheckConstraint('additional_services_amount >= 0', name='additional_services_amount_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique ledger row identifier (auto-increment)"
    )

    client_id: str = Field(
        sa_column=Column(String, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True),
        description="Client being charged"
    )

    month: int = Field(
        description="Calendar month (1-12)"
    )

    year: int = Field(
        description="Calendar year"
    )

    over_space_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Current over-capacity charge for the open period"
    )

    additional_services_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Accumulated one-off service charges"
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="over_space_amount + additional_services_amount"
    )

    over_space_charged_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=True),
        description="Start of the current continuous over-capacity period"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Row creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Last charge update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "client_id": "8c1f6a0e-3f0b-4f7e-9d55-2d0f4a1f6c11",
                "month": 3,
                "year": 2024,
                "over_space_amount": "20.000000",
                "additional_services_amount": "25.000000",
                "total_amount": "45.000000",
                "over_space_charged_at": "2024-03-04T09:00:00Z",
                "created_at": "2024-03-04T09:00:00Z",
                "updated_at": "2024-03-12T09:00:00Z"
            }
        }
