"""Domain models - pure Python dataclasses representing personal-finance records"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional


class InvestmentType(str, Enum):
    """Recognized investment classes"""

    FIXED_INCOME = "fixed_income"
    VARIABLE_INCOME = "variable_income"
    CRYPTO = "crypto"
    FIXED_INCOME_FUND = "fixed_income_fund"


# Diversification denominator. Kept as a literal so that adding an
# InvestmentType does not silently rescale existing scores.
INVESTMENT_TYPE_COUNT = 4


@dataclass
class ExpenseRecord:
    """Single bill or expense entered by the user"""

    id: str
    name: str
    amount: float
    category: str
    due_date: date


@dataclass
class InvestmentRecord:
    """Single contribution to an investment class"""

    id: str
    type: InvestmentType
    amount: float
    date: date


@dataclass
class GoalRecord:
    """Savings goal with a target amount and deadline"""

    id: str
    name: str
    target: float
    current_amount: float
    deadline: date
    reminder_days: Optional[int] = None


@dataclass
class ScoreBreakdown:
    """Financial health score and its weighted components (0-100 scale)"""

    total_score: int
    savings_score: int
    expense_score: int
    diversification_score: int
    band: str


@dataclass
class ProjectionPoint:
    """Snapshot of a growth simulation at the end of a year"""

    label: str
    year: int
    total_contributed: float
    interest_earned: float
    balance: float


@dataclass
class ProjectionSummary:
    """Totals at the end of a growth simulation"""

    total_invested: float
    total_interest: float
    final_amount: float


@dataclass
class Projection:
    """Year-by-year series plus final totals"""

    points: List[ProjectionPoint]
    summary: ProjectionSummary


@dataclass
class CategoryTotal:
    category: str
    total: float


@dataclass
class DueStatus:
    """Due date relative to the reference day"""

    state: str  # "overdue" | "due_today" | "due_tomorrow" | "upcoming"
    days: int  # negative when overdue


@dataclass
class ExpenseSummary:
    """Output of expense filtering and aggregation"""

    expenses: List[ExpenseRecord]
    total_filtered: float
    totals_by_category: Dict[str, float]
    category_ranking: List[CategoryTotal]
    totals_by_month: Dict[str, float]


@dataclass
class MonthGroup:
    """Investments made within one calendar month"""

    month: str  # "YYYY-MM"
    investments: List[InvestmentRecord]
    total: float


@dataclass
class InvestmentSummary:
    """Output of investment history filtering"""

    investments: List[InvestmentRecord]
    total_filtered: float
    totals_by_type: Dict[InvestmentType, float]
    months: List[MonthGroup] = field(default_factory=list)


@dataclass
class AllocationSuggestion:
    """Suggested split of a positive balance"""

    can_invest: bool
    personal_spending: float
    amount_to_invest: float
    allocations: Dict[InvestmentType, float]


@dataclass
class GoalProgress:
    """Progress of a goal towards its target"""

    goal_id: str
    percent: float
    remaining: float
    completed: bool
    expired: bool = False
    monthly_savings_needed: Optional[float] = None
