def setup_month(client):
    rent = client.post(
        "/api/categories", json={"name": "Rent", "monthlyBudget": 5900, "icon": "Home"}
    ).json()
    client.post("/api/budgets", json={"month": "2025-11", "totalIncome": 16060})
    client.post(
        "/api/expenses",
        json={"amount": 5900, "categoryId": rent["id"], "date": "2025-11-01"},
    )
    return rent


def test_monthly_recap_totals(client):
    rent = setup_month(client)

    response = client.get("/api/recaps/monthly/2025-11")

    assert response.status_code == 200
    data = response.json()
    assert data["totalIncome"] == 16060
    assert data["totalBudget"] == 5900
    assert data["totalSpent"] == 5900
    assert data["savings"] == 10160
    assert data["categories"] == [{
        "categoryId": rent["id"],
        "categoryName": "Rent",
        "icon": "Home",
        "isAnnual": False,
        "budget": 5900,
        "spent": 5900,
        "remaining": 0,
        "percentage": 100,
    }]


def test_monthly_recap_prorates_annual_categories(client):
    client.post(
        "/api/categories",
        json={"name": "Travel", "monthlyBudget": 1200, "icon": "Plane", "isAnnual": True},
    )

    data = client.get("/api/recaps/monthly/2025-11").json()

    assert data["categories"][0]["budget"] == 100
    assert data["totalBudget"] == 100


def test_monthly_recap_without_income_or_spending(client):
    data = client.get("/api/recaps/monthly/2030-01").json()

    assert data["totalIncome"] == 0
    assert data["totalSpent"] == 0
    assert data["savings"] == 0
    assert data["categories"] == []


def test_spending_on_unknown_category_counts_in_totals_only(client):
    setup_month(client)
    client.post(
        "/api/expenses",
        json={"amount": 40, "categoryId": "gone", "date": "2025-11-03"},
    )

    data = client.get("/api/recaps/monthly/2025-11").json()

    assert data["totalSpent"] == 5940
    assert data["savings"] == 10120
    assert [line["spent"] for line in data["categories"]] == [5900]


def test_over_budget_percentage(client):
    food = client.post(
        "/api/categories", json={"name": "Groceries", "monthlyBudget": 200}
    ).json()
    client.post("/api/expenses", json={"amount": 250, "categoryId": food["id"], "date": "2025-11-05"})

    line = client.get("/api/recaps/monthly/2025-11").json()["categories"][0]

    assert line["percentage"] == 125
    assert line["remaining"] == -50


def test_yearly_recap(client):
    rent = setup_month(client)
    client.post(
        "/api/categories",
        json={"name": "Travel", "monthlyBudget": 1200, "icon": "Plane", "isAnnual": True},
    )
    client.post("/api/budgets", json={"month": "2025-12", "totalIncome": 16000})
    client.post("/api/budgets", json={"month": "2026-01", "totalIncome": 99999})
    client.post(
        "/api/expenses",
        json={"amount": 5900, "categoryId": rent["id"], "date": "2025-12-01"},
    )
    client.post(
        "/api/expenses",
        json={"amount": 5900, "categoryId": rent["id"], "date": "2026-01-01"},
    )

    response = client.get("/api/recaps/yearly/2025")

    assert response.status_code == 200
    data = response.json()
    assert data["year"] == "2025"
    assert data["totalIncome"] == 32060
    assert data["totalSpent"] == 11800
    assert data["savings"] == 20260
    assert data["totalBudget"] == 5900 * 12 + 1200

    budgets = {line["categoryName"]: line["budget"] for line in data["categories"]}
    assert budgets == {"Rent": 70800, "Travel": 1200}

    assert [m["month"] for m in data["months"]][:2] == ["2025-01", "2025-02"]
    assert len(data["months"]) == 12
    november = data["months"][10]
    assert november == {
        "month": "2025-11",
        "totalIncome": 16060,
        "totalSpent": 5900,
        "savings": 10160,
    }
    assert data["months"][0]["totalIncome"] == 0
