from .base import BaseModel, generate_uuid
from .user import User, UserRole
from .plan import Plan
from .client import Client
from .warehouse_capacity import WarehouseCapacity
from .monthly_charge_ledger import MonthlyChargeLedger
from .client_code_sequence import ClientCodeSequence
from .capacity_snapshot import CapacitySnapshot, OverspaceCharge, calculate_weekly_overspace_charge

__all__ = [
    "BaseModel",
    "generate_uuid",
    "User",
    "UserRole",
    "Plan",
    "Client",
    "WarehouseCapacity",
    "MonthlyChargeLedger",
    "ClientCodeSequence",
    "CapacitySnapshot",
    "OverspaceCharge",
    "calculate_weekly_overspace_charge",
]
