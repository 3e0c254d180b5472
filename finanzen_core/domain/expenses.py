"""Expense filtering, sorting and aggregation"""

import logging
from datetime import date, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple
from finanzen_core.domain.models import CategoryTotal, DueStatus, ExpenseRecord, ExpenseSummary
from finanzen_core.utils.date_utils import month_end, month_key, month_start, quarter_bounds

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


class DateWindow(str, Enum):
    ALL = "all"
    THIS_MONTH = "this_month"
    LAST_30_DAYS = "last_30_days"
    THIS_QUARTER = "this_quarter"
    THIS_YEAR = "this_year"
    CUSTOM = "custom"


class SortOrder(str, Enum):
    DUE_DATE_DESC = "due_date_desc"
    DUE_DATE_ASC = "due_date_asc"
    AMOUNT_DESC = "amount_desc"
    AMOUNT_ASC = "amount_asc"


def parse_window(window: DateWindow | str) -> DateWindow:
    try:
        return DateWindow(window)
    except ValueError:
        # Unknown selectors fail open
        logger.warning("Unknown date window %r, using 'all'", window)
        return DateWindow.ALL


def resolve_window(
    window: DateWindow | str,
    reference_date: date,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Tuple[Optional[date], Optional[date]]:
    """
    Resolve a window selector to inclusive (start, end) calendar days.

    None means the bound is unconstrained. start_date/end_date are only
    used by the custom window.
    """
    window = parse_window(window)

    if window == DateWindow.THIS_MONTH:
        return month_start(reference_date), month_end(reference_date)
    elif window == DateWindow.LAST_30_DAYS:
        return reference_date - timedelta(days=30), reference_date
    elif window == DateWindow.THIS_QUARTER:
        return quarter_bounds(reference_date)
    elif window == DateWindow.THIS_YEAR:
        return date(reference_date.year, 1, 1), date(reference_date.year, 12, 31)
    elif window == DateWindow.CUSTOM:
        return start_date, end_date
    else:
        return None, None


def in_window(day: date, start: Optional[date], end: Optional[date]) -> bool:
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


def filter_expenses(
    expenses: Iterable[ExpenseRecord],
    reference_date: date,
    category: str = ALL_CATEGORIES,
    window: DateWindow | str = DateWindow.ALL,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[ExpenseRecord]:
    """Keep expenses matching the category and falling inside the date window"""
    start, end = resolve_window(window, reference_date, start_date, end_date)

    return [
        exp for exp in expenses
        if (category == ALL_CATEGORIES or exp.category == category)
        and in_window(exp.due_date, start, end)
    ]


def sort_expenses(
    expenses: Iterable[ExpenseRecord],
    order: SortOrder | str = SortOrder.DUE_DATE_DESC,
    fallback: SortOrder = SortOrder.DUE_DATE_DESC,
) -> List[ExpenseRecord]:
    """Stable sort; equal keys keep their input order in both directions.

    An unrecognized order uses `fallback`.
    """
    try:
        order = SortOrder(order)
    except ValueError:
        order = SortOrder(fallback)

    if order == SortOrder.AMOUNT_ASC:
        return sorted(expenses, key=lambda e: e.amount)
    elif order == SortOrder.AMOUNT_DESC:
        return sorted(expenses, key=lambda e: e.amount, reverse=True)
    elif order == SortOrder.DUE_DATE_ASC:
        return sorted(expenses, key=lambda e: e.due_date)
    else:
        return sorted(expenses, key=lambda e: e.due_date, reverse=True)


def totals_by_category(expenses: Iterable[ExpenseRecord]) -> Dict[str, float]:
    """Sum amounts per category, keyed in order of first appearance"""
    totals: Dict[str, float] = {}
    for exp in expenses:
        totals[exp.category] = totals.get(exp.category, 0.0) + exp.amount
    return totals


def rank_categories(totals: Dict[str, float]) -> List[CategoryTotal]:
    """Categories by descending total; ties keep first-appearance order"""
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [CategoryTotal(category=name, total=total) for name, total in ranked]


def totals_by_month(expenses: Iterable[ExpenseRecord]) -> Dict[str, float]:
    """Sum amounts per YYYY-MM bucket, oldest month first"""
    totals: Dict[str, float] = {}
    for exp in sorted(expenses, key=lambda e: e.due_date):
        key = month_key(exp.due_date)
        totals[key] = totals.get(key, 0.0) + exp.amount
    return totals


def due_status(due_date: date, reference_date: date) -> DueStatus:
    """Classify a due date relative to the reference day"""
    days = (due_date - reference_date).days

    if days < 0:
        state = "overdue"
    elif days == 0:
        state = "due_today"
    elif days == 1:
        state = "due_tomorrow"
    else:
        state = "upcoming"

    return DueStatus(state=state, days=days)


def summarize_expenses(
    expenses: Iterable[ExpenseRecord],
    reference_date: date,
    category: str = ALL_CATEGORIES,
    window: DateWindow | str = DateWindow.ALL,
    sort: SortOrder | str = SortOrder.DUE_DATE_DESC,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    fallback_sort: SortOrder = SortOrder.DUE_DATE_DESC,
) -> ExpenseSummary:
    """
    Main entry point: filter, sort and aggregate an expense collection.

    Aggregates are computed over the filtered set. Inputs are assumed
    well-formed; a negative amount is summed as-is.
    """
    filtered = filter_expenses(
        expenses,
        reference_date,
        category=category,
        window=window,
        start_date=start_date,
        end_date=end_date,
    )
    ordered = sort_expenses(filtered, sort, fallback=fallback_sort)
    by_category = totals_by_category(ordered)

    return ExpenseSummary(
        expenses=ordered,
        total_filtered=sum(exp.amount for exp in ordered),
        totals_by_category=by_category,
        category_ranking=rank_categories(by_category),
        totals_by_month=totals_by_month(ordered),
    )
