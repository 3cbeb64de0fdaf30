"""Request schemas for Charges API

Pydantic models for validating incoming HTTP requests.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class RecomputeChargesRequestSchema(BaseModel):
    """
    Request schema for recomputing over-space charges

    Used for POST /billing/charges/recompute endpoint.
    """

    client_id: str = Field(
        ...,
        min_length=1,
        description="Client identifier (required, non-empty)"
    )

    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12,
        description="Billing month (defaults to current month)"
    )

    year: Optional[int] = Field(
        default=None,
        ge=2000,
        description="Billing year (defaults to current year)"
    )


class ServiceChargeRequestSchema(BaseModel):
    """
    Request schema for adding a service charge

    Used for POST /billing/charges/services endpoint.
    """

    client_id: str = Field(
        ...,
        min_length=1,
        description="Client identifier (required, non-empty)"
    )

    amount: Decimal = Field(
        ...,
        description="Charge amount (must be > 0)"
    )

    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12,
        description="Billing month (defaults to current month)"
    )

    year: Optional[int] = Field(
        default=None,
        ge=2000,
        description="Billing year (defaults to current year)"
    )

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v):
        """Ensure amount is positive"""
        if v <= 0:
            raise ValueError("Amount must be greater than 0")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "8c1f6a0e-3f0b-4f7e-9d55-2d0f4a1f6c11",
                "amount": "35.00"
            }
        }
