from datetime import datetime
from typing import Optional, Tuple


def resolve_period(now: datetime, month: Optional[int], year: Optional[int]) -> Tuple[int, int]:
    """Billing (month, year), defaulting to the calendar period of now"""
    return (
        now.month if month is None else month,
        now.year if year is None else year,
    )
