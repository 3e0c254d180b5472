"""Savings goal endpoints"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException

from finanzen_core.api.v1.schemas import (
    ContributionRequest,
    GoalProgressRequest,
    GoalProgressResponse,
    GoalProgressSchema,
    GoalSchema,
)
from finanzen_core.api.dependencies import get_reference_date, get_request_id
from finanzen_core.domain.exceptions import InvalidContributionError
from finanzen_core.domain.goals import apply_contribution, goal_progress

router = APIRouter()


@router.post("/goals/progress", response_model=GoalProgressResponse)
def progress(
    request_body: GoalProgressRequest,
    today: date = Depends(get_reference_date),
):
    """Progress, remaining amount and monthly savings guidance per goal"""
    reference_date = request_body.reference_date or today

    results = []
    for goal in request_body.goals:
        p = goal_progress(goal.to_domain(), reference_date)
        results.append(
            GoalProgressSchema(
                goal_id=p.goal_id,
                percent=p.percent,
                remaining=p.remaining,
                completed=p.completed,
                expired=p.expired,
                monthly_savings_needed=p.monthly_savings_needed,
            )
        )

    return GoalProgressResponse(goals=results)


@router.post("/goals/contribution", response_model=GoalSchema)
def contribute(request_body: ContributionRequest, request_id: str = Depends(get_request_id)):
    """
    Apply a contribution to a goal.

    The saved amount never exceeds the goal target.
    """
    try:
        goal = apply_contribution(request_body.goal.to_domain(), request_body.amount)

    except InvalidContributionError as e:
        logging.warning(f"Invalid contribution: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return GoalSchema(
        id=goal.id,
        name=goal.name,
        target=goal.target,
        current_amount=goal.current_amount,
        deadline=goal.deadline,
        reminder_days=goal.reminder_days,
    )
