"""Background workers"""
from .overspace_recalculator import OverspaceRecalculatorWorker

__all__ = ["OverspaceRecalculatorWorker"]
