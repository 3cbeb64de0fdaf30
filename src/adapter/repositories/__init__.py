from .client_repository import SqlAlchemyClientRepository
from .sales_rep_repository import SqlAlchemySalesRepRepository
from .client_code_sequence_repository import SqlAlchemyClientCodeSequenceRepository
from .capacity_repository import SqlAlchemyCapacityRepository
from .monthly_charge_ledger_repository import SqlAlchemyMonthlyChargeLedgerRepository

__all__ = [
    "SqlAlchemyClientRepository",
    "SqlAlchemySalesRepRepository",
    "SqlAlchemyClientCodeSequenceRepository",
    "SqlAlchemyCapacityRepository",
    "SqlAlchemyMonthlyChargeLedgerRepository",
]
