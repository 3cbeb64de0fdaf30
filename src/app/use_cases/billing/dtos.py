"""Data Transfer Objects for Billing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class RecomputeOverspaceCommandDTO(BaseModel):
    """
    Command DTO for recomputing the over-capacity charge

    Used as input to RecomputeOverspaceCharge use case.
    month/year default to the current calendar period.
    """

    client_id: str = Field(
        ...,
        description="Client identifier"
    )

    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12,
        description="Billing month (1-12)"
    )

    year: Optional[int] = Field(
        default=None,
        ge=2000,
        description="Billing year"
    )


class AddServiceChargeCommandDTO(BaseModel):
    """
    Command DTO for adding a one-off service charge

    Used as input to AddServiceCharge use case. The ledger does not
    deduplicate, callers must not replay the same charge.
    """

    client_id: str = Field(
        ...,
        description="Client identifier"
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Charge amount (must be > 0)"
    )

    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12,
        description="Billing month (1-12)"
    )

    year: Optional[int] = Field(
        default=None,
        ge=2000,
        description="Billing year"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "8c1f6a0e-3f0b-4f7e-9d55-2d0f4a1f6c11",
                "amount": "35.00",
                "month": 3,
                "year": 2024
            }
        }


class MonthlyChargesResponseDTO(BaseModel):
    """Response DTO for a monthly charge ledger row"""

    ledger_id: int = Field(..., description="Ledger row ID")
    client_id: str = Field(..., description="Client identifier")
    month: int = Field(..., description="Billing month (1-12)")
    year: int = Field(..., description="Billing year")
    over_space_amount: Decimal = Field(..., description="Current over-capacity charge")
    additional_services_amount: Decimal = Field(..., description="Accumulated service charges")
    total_amount: Decimal = Field(..., description="Sum of both charge components")
    over_space_charged_at: Optional[datetime] = Field(
        default=None,
        description="Start of the open over-capacity period"
    )
    updated_at: datetime = Field(..., description="Last update timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "ledger_id": 1,
                "client_id": "8c1f6a0e-3f0b-4f7e-9d55-2d0f4a1f6c11",
                "month": 3,
                "year": 2024,
                "over_space_amount": "20.000000",
                "additional_services_amount": "25.000000",
                "total_amount": "45.000000",
                "over_space_charged_at": "2024-03-04T09:00:00Z",
                "updated_at": "2024-03-12T09:00:00Z"
            }
        }


class OverspaceRecomputeResponseDTO(BaseModel):
    """
    Response DTO for an over-capacity recompute

    Carries the capacity figures the charge was computed from.
    """

    charges: MonthlyChargesResponseDTO = Field(..., description="Ledger row after the recompute")
    used_cbm: Decimal = Field(..., description="Stored volume in m³")
    effective_limit_cbm: Decimal = Field(..., description="Base limit + buffer in m³")
    overage_cbm: Decimal = Field(..., description="Volume above the effective limit")
    rate_per_cbm_per_week: Decimal = Field(..., description="Applied weekly rate")
    weeks_charged: int = Field(..., description="Started weeks in the open period")


class RecomputeFailureDTO(BaseModel):
    client_id: str
    code: str
    message: str


class BatchRecomputeResultDTO(BaseModel):
    """Result of recomputing over-capacity charges for all clients"""

    month: int = Field(..., description="Billing month")
    year: int = Field(..., description="Billing year")
    total_clients: int = Field(..., description="Clients with a capacity row")
    recomputed: int = Field(..., description="Successful recomputes")
    open_periods: int = Field(..., description="Clients currently over capacity")
    failures: List[RecomputeFailureDTO] = Field(default_factory=list)
    execution_time_ms: int = Field(..., description="Execution time in milliseconds")
