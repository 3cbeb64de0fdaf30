"""Client Code Sequence Domain Entity

Counter behind client account codes, one per (sales rep prefix, country).
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, DateTime, String, UniqueConstraint
from src.domain.base import BaseModel, IdType


class ClientCodeSequence(BaseModel, table=True):
    """
    Client Code Sequence - Last issued suffix for a code prefix

    Domain Rules:
    - One row per (prefix, country)
    - last_value only moves forward, advanced by a single atomic UPDATE
    - Seeded from the highest existing code suffix on first use
    """

    __tablename__ = "client_code_sequences"
    __table_args__ = (
        UniqueConstraint('prefix', 'country', name='uq_client_code_sequences_prefix_country'),
        CheckConstraint('last_value >= 0', name='last_value_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique sequence identifier (auto-increment)"
    )

    prefix: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="Sales rep prefix (e.g., JD)"
    )

    country: str = Field(
        sa_column=Column(String(2), nullable=False),
        description="Country code (ISO 3166-1 alpha-2)"
    )

    last_value: int = Field(
        default=0,
        description="Last suffix handed out"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Last allocation timestamp"
    )
