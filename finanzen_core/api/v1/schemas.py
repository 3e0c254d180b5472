"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Dict, List, Literal, Optional, Union
from finanzen_core.config import settings
from finanzen_core.domain.models import ExpenseRecord, GoalRecord, InvestmentRecord, InvestmentType


class ExpenseSchema(BaseModel):
    """Expense record as stored by the client"""

    id: str = Field(..., min_length=1)
    name: str
    amount: float = Field(..., ge=0)
    category: str
    due_date: date

    def to_domain(self) -> ExpenseRecord:
        return ExpenseRecord(
            id=self.id,
            name=self.name,
            amount=self.amount,
            category=self.category,
            due_date=self.due_date,
        )


class InvestmentSchema(BaseModel):
    """Investment record as stored by the client"""

    id: str = Field(..., min_length=1)
    type: InvestmentType
    amount: float = Field(..., ge=0)
    date: date

    def to_domain(self) -> InvestmentRecord:
        return InvestmentRecord(id=self.id, type=self.type, amount=self.amount, date=self.date)


class GoalSchema(BaseModel):
    """Savings goal as stored by the client"""

    id: str = Field(..., min_length=1)
    name: str
    target: float = Field(..., gt=0)
    current_amount: float = Field(0.0, ge=0)
    deadline: date
    reminder_days: Optional[int] = Field(None, ge=0)

    def to_domain(self) -> GoalRecord:
        return GoalRecord(
            id=self.id,
            name=self.name,
            target=self.target,
            current_amount=self.current_amount,
            deadline=self.deadline,
            reminder_days=self.reminder_days,
        )


class ScoreRequest(BaseModel):
    """Request body for POST /v1/score"""

    income: float = Field(..., allow_inf_nan=False, description="Monthly income")
    total_expenses: float = Field(..., allow_inf_nan=False, description="Sum of monthly expenses")
    investments: List[InvestmentSchema] = []


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    total_score: int
    savings_score: int
    expense_score: int
    diversification_score: int
    band: str


class ExpenseSummaryRequest(BaseModel):
    """Request body for POST /v1/expenses/summary"""

    expenses: List[ExpenseSchema] = []
    category: str = "all"
    window: str = Field("all", description="all, this_month, last_30_days, this_quarter, this_year or custom")
    sort: str = settings.default_expense_sort.value
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reference_date: Optional[date] = None


class DueStatusSchema(BaseModel):
    state: str
    days: int


class ExpenseItem(ExpenseSchema):
    """Expense with its due status relative to the reference day"""

    due_status: DueStatusSchema


class CategoryTotalSchema(BaseModel):
    category: str
    total: float


class ExpenseSummaryResponse(BaseModel):
    """Response for POST /v1/expenses/summary"""

    expenses: List[ExpenseItem]
    total_filtered: float
    totals_by_category: Dict[str, float]
    category_ranking: List[CategoryTotalSchema]
    totals_by_month: Dict[str, float]


class InvestmentSummaryRequest(BaseModel):
    """Request body for POST /v1/investments/summary"""

    investments: List[InvestmentSchema] = []
    type: Union[Literal["all"], InvestmentType] = "all"
    window: str = "all"
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reference_date: Optional[date] = None


class MonthGroupSchema(BaseModel):
    month: str
    investments: List[InvestmentSchema]
    total: float


class InvestmentSummaryResponse(BaseModel):
    """Response for POST /v1/investments/summary"""

    investments: List[InvestmentSchema]
    total_filtered: float
    totals_by_type: Dict[InvestmentType, float]
    months: List[MonthGroupSchema]


class AllocationRequest(BaseModel):
    """Request body for POST /v1/investments/allocation"""

    balance: float


class AllocationResponse(BaseModel):
    """Response for POST /v1/investments/allocation"""

    can_invest: bool
    personal_spending: float
    amount_to_invest: float
    allocations: Dict[InvestmentType, float]


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projection"""

    principal: float = Field(..., ge=0, allow_inf_nan=False)
    monthly_contribution: float = Field(0.0, allow_inf_nan=False)
    annual_rate_percent: float = Field(..., allow_inf_nan=False)
    years: float = Field(..., allow_inf_nan=False)


class ProjectionPointSchema(BaseModel):
    label: str
    year: int
    total_contributed: float
    interest_earned: float
    balance: float


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    points: List[ProjectionPointSchema]
    total_invested: float
    total_interest: float
    final_amount: float


class GoalProgressRequest(BaseModel):
    """Request body for POST /v1/goals/progress"""

    goals: List[GoalSchema] = []
    reference_date: Optional[date] = None


class GoalProgressSchema(BaseModel):
    goal_id: str
    percent: float
    remaining: float
    completed: bool
    expired: bool
    monthly_savings_needed: Optional[float] = None


class GoalProgressResponse(BaseModel):
    """Response for POST /v1/goals/progress"""

    goals: List[GoalProgressSchema]


class ContributionRequest(BaseModel):
    """Request body for POST /v1/goals/contribution"""

    goal: GoalSchema
    amount: float
