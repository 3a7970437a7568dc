from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from pydantic import BaseModel

from medtransfer.common.clock import first_day_of_month, today as local_today
from medtransfer.config.settings import settings
from medtransfer.directory.models import Company, Driver
from medtransfer.transfers.schema import Transfer, TransferStatus


class DashboardSummary(BaseModel):
    day: str
    transfers_today: int
    transfers_this_month: int
    driver_count: int
    company_count: int
    recent: List[Transfer]


def build_summary(
    transfers: Sequence[Transfer],
    drivers: Sequence[Driver],
    companies: Sequence[Company],
    today: Optional[date] = None,
    recent_limit: Optional[int] = None,
) -> DashboardSummary:
    day = today or local_today()
    limit = settings.RECENT_TRANSFERS_LIMIT if recent_limit is None else recent_limit
    day_iso = day.isoformat()
    month_start = first_day_of_month(day).isoformat()

    completed = [t for t in transfers if t.status == TransferStatus.COMPLETED]
    # ISO dates order as strings; anything scheduled after today also counts toward the month
    recent = sorted(transfers, key=lambda t: (t.date, t.time), reverse=True)[:limit]

    return DashboardSummary(
        day=day_iso,
        transfers_today=sum(1 for t in completed if t.date == day_iso),
        transfers_this_month=sum(1 for t in completed if t.date >= month_start),
        driver_count=len(drivers),
        company_count=len(companies),
        recent=recent,
    )


__all__ = ["DashboardSummary", "build_summary"]
