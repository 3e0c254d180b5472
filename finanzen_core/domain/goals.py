"""Savings goal progress and contributions"""

from dataclasses import replace
from datetime import date
from typing import Optional
from finanzen_core.domain.models import GoalRecord, GoalProgress
from finanzen_core.domain.exceptions import InvalidContributionError
from finanzen_core.utils.date_utils import months_between


def goal_progress(goal: GoalRecord, reference_date: Optional[date] = None) -> GoalProgress:
    """
    Progress towards the goal target, capped at 100%.

    When reference_date is given, also computes how much must be saved per
    month to reach the target by the deadline.
    """
    percent = min(goal.current_amount / goal.target * 100, 100.0) if goal.target > 0 else 0.0
    remaining = max(goal.target - goal.current_amount, 0.0)
    completed = percent >= 100

    progress = GoalProgress(
        goal_id=goal.id,
        percent=percent,
        remaining=remaining,
        completed=completed,
    )

    if reference_date is None or completed or remaining <= 0:
        return progress

    if goal.deadline < reference_date:
        progress.expired = True
        return progress

    progress.monthly_savings_needed = monthly_savings_needed(remaining, goal.deadline, reference_date)
    return progress


def monthly_savings_needed(remaining: float, deadline: date, reference_date: date) -> float:
    """Even monthly saving to cover remaining by deadline (at least one month)"""
    months = max(months_between(reference_date, deadline), 1)
    return remaining / months


def apply_contribution(goal: GoalRecord, amount: float) -> GoalRecord:
    """
    Add a contribution to a goal, clamping current_amount at the target.

    Raises:
        InvalidContributionError: If amount is zero or negative
    """
    if amount <= 0:
        raise InvalidContributionError(f"Contribution must be positive, got {amount}")

    return replace(goal, current_amount=min(goal.current_amount + amount, goal.target))
