from datetime import datetime, timedelta
from src.app.services.clock import Clock


class FixedClock(Clock):
    """Clock frozen at a given instant, moved forward explicitly"""

    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current
