"""Client Domain Entity

Warehouse client account. Created at signup; the account code and the
owning sales representative are assigned shortly afterwards.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, DateTime, ForeignKey, Numeric, String, text
from src.domain.base import BaseModel, generate_uuid
from src.domain.client_code import TEMPORARY_CODE_PREFIX

_permanent_code = text(f"client_code NOT LIKE '{TEMPORARY_CODE_PREFIX}%'")


class Client(BaseModel, table=True):
    """
    Client - Warehouse customer account

    Domain Rules:
    - client_code format is REP-CC-NNN and is globally unique
    - Placeholder codes (TBD-CC-TEMP) are shared and excluded from uniqueness
    - country is ISO 3166-1 alpha-2
    - sales_owner_id is immutable after assignment except by admin override
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index('ix_clients_country_sales_owner', 'country', 'sales_owner_id'),
        Index(
            'uq_clients_client_code',
            'client_code',
            unique=True,
            sqlite_where=_permanent_code,
            postgresql_where=_permanent_code,
        ),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique client identifier"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Company name"
    )

    country: str = Field(
        sa_column=Column(String(2), nullable=False),
        description="Country code (ISO 3166-1 alpha-2)"
    )

    client_code: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="Account code (e.g., JD-DE-001)"
    )

    sales_owner_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        description="Assigned sales representative"
    )

    plan_id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger, ForeignKey("plans.id", ondelete="SET NULL"), nullable=True),
        description="Subscription plan"
    )

    limit_cbm: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Individual storage limit override in m³"
    )

    individual_over_space_rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Individual over-capacity rate (used when the plan has none)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Signup timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "8c1f6a0e-3f0b-4f7e-9d55-2d0f4a1f6c11",
                "name": "Nordic Parts GmbH",
                "country": "DE",
                "client_code": "JD-DE-001",
                "sales_owner_id": "b4d3c2a1-0000-4000-8000-000000000001",
                "plan_id": 2,
                "limit_cbm": None,
                "individual_over_space_rate": None,
                "created_at": "2024-01-01T00:00:00Z"
            }
        }
