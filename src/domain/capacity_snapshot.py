"""Capacity snapshot and weekly over-capacity charge calculation"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

ONE_WEEK = timedelta(weeks=1)


@dataclass(frozen=True)
class CapacitySnapshot:
    """
    Point-in-time storage position of one client

    base_limit_cbm comes from the capacity override, the client override or
    the plan (first one set). buffer_cbm is the plan's free allowance.
    """

    client_id: str
    used_cbm: Decimal
    base_limit_cbm: Decimal
    buffer_cbm: Decimal
    rate_per_cbm_per_week: Decimal

    @property
    def effective_limit_cbm(self) -> Decimal:
        return self.base_limit_cbm + self.buffer_cbm

    @property
    def is_over_limit(self) -> bool:
        return self.used_cbm > self.effective_limit_cbm

    @property
    def overage_cbm(self) -> Decimal:
        if not self.is_over_limit:
            return Decimal("0")
        return self.used_cbm - self.effective_limit_cbm


@dataclass(frozen=True)
class OverspaceCharge:
    amount: Decimal
    overage_cbm: Decimal
    weeks_charged: int
    period_start: Optional[datetime]


def calculate_weekly_overspace_charge(
    snapshot: CapacitySnapshot,
    open_period_start: Optional[datetime],
    now: datetime,
) -> OverspaceCharge:
    """
    Weekly pro-rata charge for the current continuous over-capacity period

    Every started week counts as a full week and at least one week is
    charged while over the limit. The current overage is applied to all
    weeks of the period.
    """
    if not snapshot.is_over_limit:
        return OverspaceCharge(
            amount=Decimal("0"),
            overage_cbm=Decimal("0"),
            weeks_charged=0,
            period_start=None,
        )

    overage = snapshot.overage_cbm
    period_start = open_period_start or now
    weeks_elapsed = (now - period_start) // ONE_WEEK
    weeks_charged = max(1, weeks_elapsed + 1)

    return OverspaceCharge(
        amount=overage * snapshot.rate_per_cbm_per_week * weeks_charged,
        overage_cbm=overage,
        weeks_charged=weeks_charged,
        period_start=period_start,
    )
