"""Client onboarding use cases"""
from .allocate_client_code import AllocateClientCode
from .resolve_sales_rep_prefix import ResolveSalesRepPrefix
from .assign_client_code import AssignClientCode
from .assign_sales_rep import AssignSalesRep
from .dtos import (
    AssignSalesRepCommandDTO,
    SalesRepAssignmentResponseDTO,
    ClientCodeResponseDTO,
    AssignClientCodeCommandDTO,
    AssignedClientCodeResponseDTO,
)

__all__ = [
    "AllocateClientCode",
    "ResolveSalesRepPrefix",
    "AssignClientCode",
    "AssignSalesRep",
    "AssignSalesRepCommandDTO",
    "SalesRepAssignmentResponseDTO",
    "ClientCodeResponseDTO",
    "AssignClientCodeCommandDTO",
    "AssignedClientCodeResponseDTO",
]
