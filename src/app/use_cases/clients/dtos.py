"""Data Transfer Objects for Client Onboarding Use Cases"""

from typing import Optional
from pydantic import BaseModel, Field


class AssignSalesRepCommandDTO(BaseModel):
    """
    Command DTO for assigning a client to a sales representative

    country scopes the workload count; the client's own country is used
    when omitted.
    """

    client_id: str = Field(
        ...,
        description="Client identifier"
    )

    country: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Country code (ISO 3166-1 alpha-2)"
    )


class SalesRepAssignmentResponseDTO(BaseModel):
    """Response DTO for a sales representative assignment"""

    client_id: str = Field(..., description="Client identifier")
    country: str = Field(..., description="Country the workload was counted in")
    sales_owner_id: str = Field(..., description="Assigned sales representative")
    workload_before: Optional[int] = Field(
        default=None,
        description="Clients the representative held in the country before (None when counts were unavailable)"
    )
    is_fallback: bool = Field(
        default=False,
        description="True when workload counts failed and the earliest representative was used"
    )
    already_assigned: bool = Field(
        default=False,
        description="True when the client already had a sales owner, which was kept"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "8c1f6a0e-3f0b-4f7e-9d55-2d0f4a1f6c11",
                "country": "DE",
                "sales_owner_id": "b4d3c2a1-0000-4000-8000-000000000001",
                "workload_before": 4,
                "is_fallback": False,
                "already_assigned": False
            }
        }


class ClientCodeResponseDTO(BaseModel):
    """Response DTO for an allocated client code"""

    client_code: str = Field(..., description="Allocated code (e.g., JD-DE-001)")
    rep_prefix: str = Field(..., description="Sales rep prefix")
    country: str = Field(..., description="Country code")
    sequence: Optional[int] = Field(default=None, description="Numeric suffix (None for placeholder codes)")
    is_fallback: bool = Field(
        default=False,
        description="True when the suffix was randomized after a store failure"
    )
    is_temporary: bool = Field(
        default=False,
        description="True for TBD placeholder codes"
    )


class AssignClientCodeCommandDTO(BaseModel):
    """
    Command DTO for assigning a permanent code to a client

    Without rep_prefix the prefix is derived from the client's sales owner;
    clients without an owner get a placeholder code.
    """

    client_id: str = Field(
        ...,
        description="Client identifier"
    )

    rep_prefix: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=3,
        description="Sales rep prefix override"
    )


class AssignedClientCodeResponseDTO(BaseModel):
    client_id: str = Field(..., description="Client identifier")
    client_code: str = Field(..., description="Code stored on the client")
    is_fallback: bool = Field(default=False, description="Suffix randomized after a store failure")
    is_temporary: bool = Field(default=False, description="Placeholder code")
    attempts: int = Field(default=1, description="Allocations needed to find a free code")
