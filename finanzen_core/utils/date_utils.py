"""Date manipulation utilities"""

import calendar
from datetime import date


def month_start(day: date) -> date:
    """First calendar day of the month containing day"""
    return day.replace(day=1)


def month_end(day: date) -> date:
    """Last calendar day of the month containing day"""
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def quarter_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the quarter containing day"""
    first_month = ((day.month - 1) // 3) * 3 + 1
    start = date(day.year, first_month, 1)
    end = month_end(date(day.year, first_month + 2, 1))
    return start, end


def month_key(day: date) -> str:
    """Bucket key for monthly aggregation, e.g. 2024-03"""
    return f"{day.year:04d}-{day.month:02d}"


def months_between(start: date, end: date) -> int:
    """Calendar months from start to end, ignoring the day of month"""
    return (end.year - start.year) * 12 - start.month + end.month
