"""POST /v1/projection - Compound growth projection endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from finanzen_core.api.v1.schemas import ProjectionPointSchema, ProjectionRequest, ProjectionResponse
from finanzen_core.api.dependencies import get_request_id
from finanzen_core.config import settings
from finanzen_core.domain.exceptions import ProjectionUnavailableError
from finanzen_core.domain.models import Projection
from finanzen_core.domain.projection import project_growth
from finanzen_core.infrastructure.observability.metrics import record_projection
from finanzen_core.infrastructure.observability.logging import log_projection

router = APIRouter()


def _require_projection(request_body: ProjectionRequest) -> Projection:
    if request_body.years > settings.max_projection_years:
        raise ProjectionUnavailableError(
            f"Projection period is limited to {settings.max_projection_years} years"
        )

    projection = project_growth(
        request_body.principal,
        request_body.monthly_contribution,
        request_body.annual_rate_percent,
        request_body.years,
    )
    if projection is None:
        raise ProjectionUnavailableError("Annual rate and period must be positive numbers")
    return projection


@router.post("/projection", response_model=ProjectionResponse)
def create_projection(request_body: ProjectionRequest, request_id: str = Depends(get_request_id)):
    """
    Simulate monthly compound growth with a fixed monthly contribution.

    Each month the balance grows first, then the contribution is added.
    Returns one point per year (plus a partial final year) and final totals.
    """
    start_time = time.perf_counter()

    try:
        projection = _require_projection(request_body)

    except ProjectionUnavailableError as e:
        record_projection(False)
        log_projection(request_id, request_body.years, False, (time.perf_counter() - start_time) * 1000)
        logging.warning(f"Projection unavailable: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_projection(True)
    log_projection(request_id, request_body.years, True, (time.perf_counter() - start_time) * 1000)

    return ProjectionResponse(
        points=[
            ProjectionPointSchema(
                label=point.label,
                year=point.year,
                total_contributed=point.total_contributed,
                interest_earned=point.interest_earned,
                balance=point.balance,
            )
            for point in projection.points
        ],
        total_invested=projection.summary.total_invested,
        total_interest=projection.summary.total_interest,
        final_amount=projection.summary.final_amount,
    )
