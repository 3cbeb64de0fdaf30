"""Billing domain use cases"""
from .recompute_overspace_charge import RecomputeOverspaceCharge
from .recompute_overspace_charges import RecomputeOverspaceCharges
from .add_service_charge import AddServiceCharge
from .get_monthly_charges import GetMonthlyCharges
from .dtos import (
    RecomputeOverspaceCommandDTO,
    AddServiceChargeCommandDTO,
    MonthlyChargesResponseDTO,
    OverspaceRecomputeResponseDTO,
    RecomputeFailureDTO,
    BatchRecomputeResultDTO,
)

__all__ = [
    "RecomputeOverspaceCharge",
    "RecomputeOverspaceCharges",
    "AddServiceCharge",
    "GetMonthlyCharges",
    "RecomputeOverspaceCommandDTO",
    "AddServiceChargeCommandDTO",
    "MonthlyChargesResponseDTO",
    "OverspaceRecomputeResponseDTO",
    "RecomputeFailureDTO",
    "BatchRecomputeResultDTO",
]
