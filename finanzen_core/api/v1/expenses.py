"""POST /v1/expenses/summary - Filtered and aggregated expense view"""

from datetime import date
from fastapi import APIRouter, Depends

from finanzen_core.api.v1.schemas import (
    CategoryTotalSchema,
    DueStatusSchema,
    ExpenseItem,
    ExpenseSummaryRequest,
    ExpenseSummaryResponse,
)
from finanzen_core.api.dependencies import get_reference_date
from finanzen_core.config import settings
from finanzen_core.domain.expenses import due_status, parse_window, summarize_expenses
from finanzen_core.infrastructure.observability.metrics import expense_summary_counter

router = APIRouter()


@router.post("/expenses/summary", response_model=ExpenseSummaryResponse)
def summarize(
    request_body: ExpenseSummaryRequest,
    today: date = Depends(get_reference_date),
):
    """
    Filter expenses by category and date window, sort, and aggregate.

    Unknown window selectors fall back to "all"; unknown sort keys fall back
    to the configured default sort.
    """
    reference_date = request_body.reference_date or today
    window = parse_window(request_body.window)

    summary = summarize_expenses(
        [exp.to_domain() for exp in request_body.expenses],
        reference_date,
        category=request_body.category,
        window=window,
        sort=request_body.sort,
        start_date=request_body.start_date,
        end_date=request_body.end_date,
        fallback_sort=settings.default_expense_sort,
    )
    expense_summary_counter.labels(window=window.value).inc()

    items = []
    for exp in summary.expenses:
        status = due_status(exp.due_date, reference_date)
        items.append(
            ExpenseItem(
                id=exp.id,
                name=exp.name,
                amount=exp.amount,
                category=exp.category,
                due_date=exp.due_date,
                due_status=DueStatusSchema(state=status.state, days=status.days),
            )
        )

    return ExpenseSummaryResponse(
        expenses=items,
        total_filtered=summary.total_filtered,
        totals_by_category=summary.totals_by_category,
        category_ranking=[
            CategoryTotalSchema(category=c.category, total=c.total) for c in summary.category_ranking
        ],
        totals_by_month=summary.totals_by_month,
    )
