"""POST /v1/score - Financial health score endpoint"""

import time
from fastapi import APIRouter, Depends

from finanzen_core.api.v1.schemas import ScoreRequest, ScoreResponse
from finanzen_core.api.dependencies import get_request_id
from finanzen_core.domain.scoring import calculate_financial_health
from finanzen_core.infrastructure.observability.metrics import record_score
from finanzen_core.infrastructure.observability.logging import log_score

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
def compute_score(request_body: ScoreRequest, request_id: str = Depends(get_request_id)):
    """
    Compute the 0-100 financial health score.

    Components:
    - Savings rate (50 pts): full marks at 20%+ of income saved
    - Expense control (30 pts): full marks at expenses <= 50% of income
    - Diversification (20 pts): 5 pts per investment type held
    """
    start_time = time.perf_counter()

    breakdown = calculate_financial_health(
        request_body.income,
        request_body.total_expenses,
        [inv.to_domain() for inv in request_body.investments],
    )

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_score(breakdown)
    log_score(request_id, breakdown, duration_ms)

    return ScoreResponse(
        total_score=breakdown.total_score,
        savings_score=breakdown.savings_score,
        expense_score=breakdown.expense_score,
        diversification_score=breakdown.diversification_score,
        band=breakdown.band,
    )
