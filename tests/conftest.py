"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from finanzen_core.api.main import create_app
from finanzen_core.api.dependencies import get_reference_date
from finanzen_core.domain.models import ExpenseRecord, GoalRecord, InvestmentRecord, InvestmentType


# Fixed "today" so date windows are reproducible
REFERENCE_DATE = date(2024, 3, 20)


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a pinned reference date"""
    app = create_app()
    app.dependency_overrides[get_reference_date] = lambda: REFERENCE_DATE
    return TestClient(app)


@pytest.fixture
def sample_expenses() -> list[ExpenseRecord]:
    """Three expenses in two categories spread over February and March"""
    return [
        ExpenseRecord(id="e1", name="Groceries", amount=100.0, category="Food", due_date=date(2024, 3, 5)),
        ExpenseRecord(id="e2", name="Bakery", amount=50.0, category="Food", due_date=date(2024, 2, 10)),
        ExpenseRecord(id="e3", name="Rent", amount=200.0, category="Housing", due_date=date(2024, 3, 15)),
    ]


@pytest.fixture
def sample_investments() -> list[InvestmentRecord]:
    return [
        InvestmentRecord(id="i1", type=InvestmentType.FIXED_INCOME, amount=500.0, date=date(2024, 3, 2)),
        InvestmentRecord(id="i2", type=InvestmentType.CRYPTO, amount=100.0, date=date(2024, 3, 12)),
        InvestmentRecord(id="i3", type=InvestmentType.FIXED_INCOME, amount=300.0, date=date(2024, 1, 8)),
        InvestmentRecord(id="i4", type=InvestmentType.VARIABLE_INCOME, amount=250.0, date=date(2023, 11, 30)),
    ]


@pytest.fixture
def sample_goal() -> GoalRecord:
    return GoalRecord(
        id="g1",
        name="Emergency fund",
        target=15000.0,
        current_amount=6000.0,
        deadline=date(2024, 9, 30),
    )
