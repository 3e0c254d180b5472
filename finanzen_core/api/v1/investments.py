"""Investment history and allocation endpoints"""

from datetime import date
from fastapi import APIRouter, Depends

from finanzen_core.api.v1.schemas import (
    AllocationRequest,
    AllocationResponse,
    InvestmentSchema,
    InvestmentSummaryRequest,
    InvestmentSummaryResponse,
    MonthGroupSchema,
)
from finanzen_core.api.dependencies import get_reference_date
from finanzen_core.domain.investments import suggest_allocation, summarize_investments
from finanzen_core.domain.models import InvestmentRecord

router = APIRouter()


def _to_schema(inv: InvestmentRecord) -> InvestmentSchema:
    return InvestmentSchema(id=inv.id, type=inv.type, amount=inv.amount, date=inv.date)


@router.post("/investments/summary", response_model=InvestmentSummaryResponse)
def summarize(
    request_body: InvestmentSummaryRequest,
    today: date = Depends(get_reference_date),
):
    """
    Filter investment history by type and date window.

    Returns totals for every investment type and month groups, newest first.
    """
    summary = summarize_investments(
        [inv.to_domain() for inv in request_body.investments],
        request_body.reference_date or today,
        investment_type=request_body.type,
        window=request_body.window,
        start_date=request_body.start_date,
        end_date=request_body.end_date,
    )

    return InvestmentSummaryResponse(
        investments=[_to_schema(inv) for inv in summary.investments],
        total_filtered=summary.total_filtered,
        totals_by_type=summary.totals_by_type,
        months=[
            MonthGroupSchema(
                month=group.month,
                investments=[_to_schema(inv) for inv in group.investments],
                total=group.total,
            )
            for group in summary.months
        ],
    )


@router.post("/investments/allocation", response_model=AllocationResponse)
def allocation(request_body: AllocationRequest):
    """Suggest how to split a positive monthly balance across investment types"""
    suggestion = suggest_allocation(request_body.balance)

    return AllocationResponse(
        can_invest=suggestion.can_invest,
        personal_spending=suggestion.personal_spending,
        amount_to_invest=suggestion.amount_to_invest,
        allocations=suggestion.allocations,
    )
