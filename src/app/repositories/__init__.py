from .client_repository import ClientRepository
from .sales_rep_repository import SalesRepRepository
from .client_code_sequence_repository import ClientCodeSequenceRepository
from .capacity_repository import CapacityRepository
from .monthly_charge_ledger_repository import MonthlyChargeLedgerRepository

__all__ = [
    "ClientRepository",
    "SalesRepRepository",
    "ClientCodeSequenceRepository",
    "CapacityRepository",
    "MonthlyChargeLedgerRepository",
]
