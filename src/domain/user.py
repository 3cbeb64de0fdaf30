"""User Domain Entity

Platform users. Users holding one of the admin-tier roles act as sales
representatives and own client accounts. Read-only to the billing core.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid


class UserRole(str, Enum):
    """Platform roles"""
    CLIENT = "CLIENT"
    WAREHOUSE = "WAREHOUSE"
    ADMIN = "ADMIN"
    SUPERADMIN = "SUPERADMIN"


class User(BaseModel, table=True):
    """
    User - Platform account, sales representative when admin-tier

    Domain Rules:
    - created_at is the tie-break key when balancing client assignments
      (first-registered representative wins)
    - Workload is not stored, it is derived from Client rows
    """

    __tablename__ = "users"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique user identifier"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Login email address"
    )

    name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Display name"
    )

    role: UserRole = Field(
        index=True,
        description="Platform role (CLIENT, WAREHOUSE, ADMIN, SUPERADMIN)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Registration timestamp"
    )
