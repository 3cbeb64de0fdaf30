from .unit_of_work import SqlAlchemyUnitOfWork
from .clock import SystemClock

__all__ = [
    "SqlAlchemyUnitOfWork",
    "SystemClock",
]
