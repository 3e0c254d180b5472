"""Investment history filtering and balance allocation suggestions"""

from datetime import date
from typing import Dict, Iterable, List, Optional
from finanzen_core.domain.expenses import DateWindow, in_window, resolve_window
from finanzen_core.domain.models import (
    AllocationSuggestion,
    InvestmentRecord,
    InvestmentSummary,
    InvestmentType,
    MonthGroup,
)
from finanzen_core.utils.date_utils import month_key

ALL_TYPES = "all"

# Share of a positive balance kept for personal spending
PERSONAL_SPENDING_SHARE = 0.15

# Split of the investable remainder, in percent
ALLOCATION_PERCENTAGES: Dict[InvestmentType, int] = {
    InvestmentType.FIXED_INCOME: 40,
    InvestmentType.FIXED_INCOME_FUND: 30,
    InvestmentType.VARIABLE_INCOME: 20,
    InvestmentType.CRYPTO: 10,
}


def filter_investments(
    investments: Iterable[InvestmentRecord],
    reference_date: date,
    investment_type: InvestmentType | str = ALL_TYPES,
    window: DateWindow | str = DateWindow.ALL,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[InvestmentRecord]:
    """Keep investments of the given type made inside the date window"""
    start, end = resolve_window(window, reference_date, start_date, end_date)

    return [
        inv for inv in investments
        if (investment_type == ALL_TYPES or inv.type == investment_type)
        and in_window(inv.date, start, end)
    ]


def totals_by_type(investments: Iterable[InvestmentRecord]) -> Dict[InvestmentType, float]:
    """Sum per investment type; every type is present, zero when unused"""
    totals = {inv_type: 0.0 for inv_type in InvestmentType}
    for inv in investments:
        totals[inv.type] += inv.amount
    return totals


def group_by_month(investments: Iterable[InvestmentRecord]) -> List[MonthGroup]:
    """Group investments per calendar month, newest month and record first"""
    groups: Dict[str, MonthGroup] = {}
    for inv in sorted(investments, key=lambda i: i.date, reverse=True):
        key = month_key(inv.date)
        if key not in groups:
            groups[key] = MonthGroup(month=key, investments=[], total=0.0)
        groups[key].investments.append(inv)
        groups[key].total += inv.amount
    return list(groups.values())


def summarize_investments(
    investments: Iterable[InvestmentRecord],
    reference_date: date,
    investment_type: InvestmentType | str = ALL_TYPES,
    window: DateWindow | str = DateWindow.ALL,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> InvestmentSummary:
    filtered = filter_investments(
        investments,
        reference_date,
        investment_type=investment_type,
        window=window,
        start_date=start_date,
        end_date=end_date,
    )

    return InvestmentSummary(
        investments=filtered,
        total_filtered=sum(inv.amount for inv in filtered),
        totals_by_type=totals_by_type(filtered),
        months=group_by_month(filtered),
    )


def suggest_allocation(balance: float) -> AllocationSuggestion:
    """
    Suggest how to split the monthly balance.

    Requirements:
    - Only a positive balance can be invested
    - 15% of the balance is set aside for personal spending
    - The rest is split 40/30/20/10 across fixed income, fixed income
      funds, variable income and crypto

    Example:
        balance 1000 -> personal 150, invest 850
        -> fixed income 340, fund 255, variable 170, crypto 85
    """
    if balance <= 0:
        return AllocationSuggestion(
            can_invest=False,
            personal_spending=0.0,
            amount_to_invest=0.0,
            allocations={inv_type: 0.0 for inv_type in ALLOCATION_PERCENTAGES},
        )

    personal_spending = balance * PERSONAL_SPENDING_SHARE
    amount_to_invest = balance - personal_spending

    return AllocationSuggestion(
        can_invest=True,
        personal_spending=personal_spending,
        amount_to_invest=amount_to_invest,
        allocations={
            inv_type: amount_to_invest * (percentage / 100)
            for inv_type, percentage in ALLOCATION_PERCENTAGES.items()
        },
    )
