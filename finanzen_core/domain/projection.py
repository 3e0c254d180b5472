"""Compound growth projection with monthly compounding and fixed contributions"""

import math
from typing import Iterator, Optional
from finanzen_core.domain.models import Projection, ProjectionPoint, ProjectionSummary


def _is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def iter_growth(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: float,
) -> Iterator[ProjectionPoint]:
    """
    Simulate month by month, yielding one point per elapsed year.

    Each month the balance grows first and the contribution lands after, so a
    contribution starts earning interest the following month. A point is also
    emitted for a final month that does not land on a year boundary.
    Callers validate inputs; see project_growth.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    total_months = int(years * 12)
    balance = principal

    for month in range(1, total_months + 1):
        balance *= 1 + monthly_rate
        balance += monthly_contribution

        if month % 12 == 0 or month == total_months:
            year = math.ceil(month / 12)
            total_contributed = principal + monthly_contribution * month
            yield ProjectionPoint(
                label=f"Year {year}",
                year=year,
                total_contributed=total_contributed,
                interest_earned=balance - total_contributed,
                balance=balance,
            )


def project_growth(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: float,
) -> Optional[Projection]:
    """
    Main entry point: year-by-year series plus final totals.

    Returns None when no projection is possible: a non-finite input, a rate
    of 0% or less, a period shorter than one month, or a balance that overflows
    to infinity. A fractional number of years ends with a partial final year.
    No rounding is applied.
    """
    inputs = (principal, monthly_contribution, annual_rate_percent, years)
    if not all(_is_finite_number(value) for value in inputs):
        return None
    if annual_rate_percent <= 0 or years <= 0 or int(years * 12) < 1:
        return None

    points = list(iter_growth(principal, monthly_contribution, annual_rate_percent, years))
    if not all(math.isfinite(p.balance) for p in points):
        return None

    last = points[-1]

    return Projection(
        points=points,
        summary=ProjectionSummary(
            total_invested=last.total_contributed,
            total_interest=last.balance - last.total_contributed,
            final_amount=last.balance,
        ),
    )
