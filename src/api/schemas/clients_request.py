"""Request schemas for Clients API"""

from typing import Optional
from pydantic import BaseModel, Field


class AssignSalesRepRequestSchema(BaseModel):
    country: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Country to balance in (defaults to the client's country)"
    )


class AssignClientCodeRequestSchema(BaseModel):
    rep_prefix: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=3,
        description="Sales rep prefix (derived from the sales owner when omitted)"
    )
