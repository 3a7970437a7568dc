from __future__ import annotations

from datetime import date, datetime


def today() -> date:
    # calendar date of the dispatcher's local clock, not UTC
    return datetime.now().date()


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


__all__ = ["today", "first_day_of_month"]
