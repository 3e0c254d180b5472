"""Financial health scoring engine - weighted sum of savings, expense control and diversification"""

import math
from typing import Iterable
from finanzen_core.domain.models import InvestmentRecord, ScoreBreakdown, INVESTMENT_TYPE_COUNT

# Component weights, summing to 1.0
SAVINGS_WEIGHT = 0.50
EXPENSE_WEIGHT = 0.30
DIVERSIFICATION_WEIGHT = 0.20

TARGET_SAVINGS_RATE = 0.20
EXPENSE_RATIO_CEILING = 0.50


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (display rounding)"""
    return int(math.floor(value + 0.5))


def calculate_savings_score(income: float, total_expenses: float) -> float:
    """
    Savings component, 0 to 50 points.

    Saving 20% or more of income earns the full weight; below that the score
    scales linearly. A negative balance or zero income scores 0.
    """
    balance = income - total_expenses
    savings_rate = balance / income if income > 0 else 0.0
    return _clamp(savings_rate / TARGET_SAVINGS_RATE) * SAVINGS_WEIGHT * 100


def calculate_expense_score(income: float, total_expenses: float) -> float:
    """
    Expense control component, 0 to 30 points.

    Expenses up to 50% of income earn the full weight, degrading linearly to
    zero at 100% of income. Zero income is treated as a 100% ratio.
    """
    expense_ratio = total_expenses / income if income > 0 else 1.0
    overshoot = max(0.0, expense_ratio - EXPENSE_RATIO_CEILING)
    return _clamp(1 - overshoot / EXPENSE_RATIO_CEILING) * EXPENSE_WEIGHT * 100


def count_distinct_types(investments: Iterable[InvestmentRecord]) -> int:
    return len({inv.type for inv in investments})


def calculate_diversification_score(investments: Iterable[InvestmentRecord]) -> float:
    """Diversification component, 0 to 20 points (5 per investment type held)"""
    distinct = count_distinct_types(investments)
    diversification = distinct / INVESTMENT_TYPE_COUNT if distinct > 0 else 0.0
    return diversification * DIVERSIFICATION_WEIGHT * 100


def score_band(total_score: int) -> str:
    """
    Map total score to a display band.

    - 0 - 39:  needs_attention
    - 40 - 69: fair
    - 70+:     healthy
    """
    if total_score < 40:
        return "needs_attention"
    elif total_score < 70:
        return "fair"
    else:
        return "healthy"


def calculate_financial_health(
    income: float,
    total_expenses: float,
    investments: Iterable[InvestmentRecord],
) -> ScoreBreakdown:
    """
    Main entry point: compute the 0-100 financial health score.

    The total is rounded from the unrounded sum of the components; each
    component is rounded on its own for display, so the displayed parts may
    not add up exactly to the total.
    """
    investments = list(investments)

    savings = calculate_savings_score(income, total_expenses)
    expense = calculate_expense_score(income, total_expenses)
    diversification = calculate_diversification_score(investments)

    total = round_half_up(savings + expense + diversification)

    return ScoreBreakdown(
        total_score=total,
        savings_score=round_half_up(savings),
        expense_score=round_half_up(expense),
        diversification_score=round_half_up(diversification),
        band=score_band(total),
    )
