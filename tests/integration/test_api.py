"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from finanzen_core.config import settings
from finanzen_core.domain.expenses import SortOrder


@pytest.fixture
def expenses_payload():
    """Client-side expense records, as held in browser storage"""
    return [
        {"id": "e1", "name": "Groceries", "amount": 100.0, "category": "Food", "due_date": "2024-03-05"},
        {"id": "e2", "name": "Bakery", "amount": 50.0, "category": "Food", "due_date": "2024-02-10"},
        {"id": "e3", "name": "Rent", "amount": 200.0, "category": "Housing", "due_date": "2024-03-21"},
    ]


@pytest.fixture
def investments_payload():
    return [
        {"id": "i1", "type": "fixed_income", "amount": 500.0, "date": "2024-03-02"},
        {"id": "i2", "type": "crypto", "amount": 100.0, "date": "2024-03-12"},
        {"id": "i3", "type": "variable_income", "amount": 250.0, "date": "2023-11-30"},
    ]


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/score", json={"income": 5000, "total_expenses": 4000})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "finanzen_score_total" in response.text


def test_score_endpoint(client: TestClient):
    """Test POST /v1/score with the reference scenario"""
    response = client.post("/v1/score", json={"income": 5000, "total_expenses": 4000, "investments": []})

    assert response.status_code == 200
    assert response.json() == {
        "total_score": 62,
        "savings_score": 50,
        "expense_score": 12,
        "diversification_score": 0,
        "band": "fair",
    }


def test_score_endpoint_with_investments(client: TestClient, investments_payload):
    response = client.post(
        "/v1/score",
        json={"income": 5000, "total_expenses": 4000, "investments": investments_payload},
    )

    assert response.status_code == 200
    assert response.json()["diversification_score"] == 15
    assert response.json()["total_score"] == 77


def test_score_endpoint_rejects_unknown_investment_type(client: TestClient):
    response = client.post(
        "/v1/score",
        json={
            "income": 5000,
            "total_expenses": 4000,
            "investments": [{"id": "x", "type": "real_estate", "amount": 10, "date": "2024-01-01"}],
        },
    )
    assert response.status_code == 422


def test_expense_summary_endpoint(client: TestClient, expenses_payload):
    """Test POST /v1/expenses/summary for the current month"""
    response = client.post(
        "/v1/expenses/summary",
        json={"expenses": expenses_payload, "window": "this_month"},
    )

    assert response.status_code == 200
    data = response.json()
    assert [e["id"] for e in data["expenses"]] == ["e3", "e1"]
    assert data["total_filtered"] == 300.0
    assert data["totals_by_category"] == {"Housing": 200.0, "Food": 100.0}
    assert data["category_ranking"][0] == {"category": "Housing", "total": 200.0}
    assert data["totals_by_month"] == {"2024-03": 300.0}

    # Reference date pinned to 2024-03-20
    assert data["expenses"][0]["due_status"] == {"state": "due_tomorrow", "days": 1}
    assert data["expenses"][1]["due_status"] == {"state": "overdue", "days": -15}


def test_expense_summary_by_category(client: TestClient, expenses_payload):
    response = client.post(
        "/v1/expenses/summary",
        json={"expenses": expenses_payload, "category": "Food", "sort": "amount_asc"},
    )

    data = response.json()
    assert [e["id"] for e in data["expenses"]] == ["e2", "e1"]
    assert data["total_filtered"] == 150.0


def test_expense_summary_unknown_window_returns_everything(client: TestClient, expenses_payload):
    response = client.post(
        "/v1/expenses/summary",
        json={"expenses": expenses_payload, "window": "fortnight"},
    )

    assert response.status_code == 200
    assert len(response.json()["expenses"]) == 3


def test_expense_summary_unknown_sort_uses_configured_default(client: TestClient, expenses_payload, monkeypatch):
    monkeypatch.setattr(settings, "default_expense_sort", SortOrder.AMOUNT_ASC)

    response = client.post(
        "/v1/expenses/summary",
        json={"expenses": expenses_payload, "sort": "alphabetical"},
    )

    assert response.status_code == 200
    assert [e["id"] for e in response.json()["expenses"]] == ["e2", "e1", "e3"]


def test_expense_summary_explicit_reference_date(client: TestClient, expenses_payload):
    response = client.post(
        "/v1/expenses/summary",
        json={"expenses": expenses_payload, "window": "this_month", "reference_date": "2024-02-01"},
    )

    assert [e["id"] for e in response.json()["expenses"]] == ["e2"]


def test_expense_summary_rejects_negative_amount(client: TestClient):
    response = client.post(
        "/v1/expenses/summary",
        json={"expenses": [{"id": "e", "name": "Refund", "amount": -5, "category": "x", "due_date": "2024-03-01"}]},
    )
    assert response.status_code == 422


def test_expense_summary_empty(client: TestClient):
    response = client.post("/v1/expenses/summary", json={"expenses": []})

    assert response.status_code == 200
    data = response.json()
    assert data["expenses"] == []
    assert data["total_filtered"] == 0


def test_investment_summary_endpoint(client: TestClient, investments_payload):
    response = client.post(
        "/v1/investments/summary",
        json={"investments": investments_payload, "window": "this_year"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_filtered"] == 600.0
    assert data["totals_by_type"] == {
        "fixed_income": 500.0,
        "variable_income": 0.0,
        "crypto": 100.0,
        "fixed_income_fund": 0.0,
    }
    assert [g["month"] for g in data["months"]] == ["2024-03"]


def test_investment_summary_rejects_unknown_type(client: TestClient, investments_payload):
    response = client.post(
        "/v1/investments/summary",
        json={"investments": investments_payload, "type": "cryptoo"},
    )
    assert response.status_code == 422


def test_investment_summary_by_type(client: TestClient, investments_payload):
    response = client.post(
        "/v1/investments/summary",
        json={"investments": investments_payload, "type": "crypto"},
    )

    assert response.status_code == 200
    assert [i["id"] for i in response.json()["investments"]] == ["i2"]


def test_allocation_endpoint(client: TestClient):
    response = client.post("/v1/investments/allocation", json={"balance": 1000})

    assert response.status_code == 200
    data = response.json()
    assert data["can_invest"] is True
    assert data["amount_to_invest"] == pytest.approx(850)
    assert data["allocations"]["fixed_income"] == pytest.approx(340)


def test_projection_endpoint(client: TestClient):
    """Test POST /v1/projection"""
    response = client.post(
        "/v1/projection",
        json={"principal": 1000, "monthly_contribution": 200, "annual_rate_percent": 8, "years": 2},
    )

    assert response.status_code == 200
    data = response.json()
    assert [p["label"] for p in data["points"]] == ["Year 1", "Year 2"]
    assert data["total_invested"] == 5800
    assert data["total_interest"] == pytest.approx(data["final_amount"] - 5800)


@pytest.mark.parametrize(
    "payload",
    [
        {"principal": 1000, "annual_rate_percent": 0, "years": 5},
        {"principal": 1000, "annual_rate_percent": 8, "years": 0},
        {"principal": 1000, "annual_rate_percent": 8, "years": 101},
        {"principal": 1000, "annual_rate_percent": 100000, "years": 100},
    ],
)
def test_projection_endpoint_unavailable(client: TestClient, payload):
    response = client.post("/v1/projection", json=payload)

    assert response.status_code == 422
    assert isinstance(response.json()["detail"], str)


@pytest.mark.parametrize(
    "url,body",
    [
        ("/v1/score", '{"income": 1000, "total_expenses": NaN}'),
        ("/v1/score", '{"income": Infinity, "total_expenses": 0}'),
        ("/v1/projection", '{"principal": 1000, "annual_rate_percent": 8, "years": Infinity}'),
        ("/v1/projection", '{"principal": 1000, "monthly_contribution": NaN, "annual_rate_percent": 8, "years": 5}'),
    ],
)
def test_non_finite_numbers_are_rejected(client: TestClient, url, body):
    response = client.post(url, content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 422


def test_goal_progress_endpoint(client: TestClient):
    response = client.post(
        "/v1/goals/progress",
        json={
            "goals": [
                {"id": "g1", "name": "Trip", "target": 20000, "current_amount": 7500, "deadline": "2026-03-20"},
                {"id": "g2", "name": "Emergency", "target": 15000, "current_amount": 15000, "deadline": "2024-03-20"},
                {"id": "g3", "name": "Laptop", "target": 8000, "current_amount": 3200, "deadline": "2024-01-31"},
            ]
        },
    )

    assert response.status_code == 200
    trip, emergency, laptop = response.json()["goals"]

    assert trip["percent"] == pytest.approx(37.5)
    assert trip["monthly_savings_needed"] == pytest.approx(12500 / 24)
    assert emergency["completed"] is True
    assert emergency["monthly_savings_needed"] is None
    assert laptop["expired"] is True


def test_goal_contribution_endpoint(client: TestClient):
    goal = {"id": "g1", "name": "Trip", "target": 1000, "current_amount": 900, "deadline": "2025-01-01"}

    response = client.post("/v1/goals/contribution", json={"goal": goal, "amount": 250})

    assert response.status_code == 200
    assert response.json()["current_amount"] == 1000


def test_goal_contribution_rejects_non_positive(client: TestClient):
    goal = {"id": "g1", "name": "Trip", "target": 1000, "current_amount": 900, "deadline": "2025-01-01"}

    response = client.post("/v1/goals/contribution", json={"goal": goal, "amount": 0})

    assert response.status_code == 422
    assert "positive" in response.json()["detail"]
