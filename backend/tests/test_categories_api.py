from fastapi.testclient import TestClient

from budget_tracker.main import app
from budget_tracker.storage import MemoryStorage, StorageError, get_storage


def create(client, **body):
    payload = {"name": "Rent", "monthlyBudget": 5900, "icon": "Home"}
    payload.update(body)
    return client.post("/api/categories", json=payload)


def test_create_category(client):
    response = create(client)

    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["name"] == "Rent"
    assert data["monthlyBudget"] == 5900
    assert data["icon"] == "Home"
    assert data["isAnnual"] is False


def test_create_category_coerces_numeric_string_and_defaults_icon(client):
    response = client.post("/api/categories", json={"name": "Fun", "monthlyBudget": "500"})

    assert response.status_code == 201
    assert response.json()["monthlyBudget"] == 500
    assert response.json()["icon"] == "DollarSign"


def test_create_annual_category(client):
    response = create(client, name="Travel", monthlyBudget=3000, isAnnual=True)

    assert response.status_code == 201
    assert response.json()["isAnnual"] is True


def test_create_category_validation_errors(client):
    for body in (
        {"name": "", "monthlyBudget": 100},
        {"name": "Rent", "monthlyBudget": 0},
        {"name": "Rent", "monthlyBudget": -5},
        {"name": "Rent", "monthlyBudget": "lots"},
        {"monthlyBudget": 100},
    ):
        response = client.post("/api/categories", json=body)
        assert response.status_code == 400, body
        data = response.json()
        assert data["message"] == "Invalid category data"
        assert data["errors"]


def test_list_categories(client):
    create(client, name="Rent")
    create(client, name="Groceries", monthlyBudget=1500, icon="ShoppingCart")

    response = client.get("/api/categories")

    assert response.status_code == 200
    assert sorted(c["name"] for c in response.json()) == ["Groceries", "Rent"]


def test_update_category(client):
    category_id = create(client).json()["id"]

    response = client.patch(f"/api/categories/{category_id}", json={"monthlyBudget": 6000})

    assert response.status_code == 200
    assert response.json()["monthlyBudget"] == 6000
    assert response.json()["name"] == "Rent"


def test_update_category_empty_body_returns_it_unchanged(client):
    created = create(client).json()

    response = client.patch(f"/api/categories/{created['id']}", json={})

    assert response.status_code == 200
    assert response.json() == created


def test_update_category_has_no_budget_floor(client):
    category_id = create(client).json()["id"]

    response = client.patch(f"/api/categories/{category_id}", json={"monthlyBudget": 0})

    assert response.status_code == 200
    assert response.json()["monthlyBudget"] == 0


def test_update_category_ignores_null_fields(client):
    created = create(client).json()

    response = client.patch(f"/api/categories/{created['id']}", json={"name": None, "icon": "Car"})

    assert response.status_code == 200
    assert response.json()["name"] == "Rent"
    assert response.json()["icon"] == "Car"


def test_update_category_rejects_empty_name(client):
    category_id = create(client).json()["id"]

    response = client.patch(f"/api/categories/{category_id}", json={"name": ""})

    assert response.status_code == 400


def test_update_unknown_category(client):
    response = client.patch("/api/categories/missing", json={"name": "x"})

    assert response.status_code == 404
    assert response.json() == {"message": "Category not found"}


def test_delete_category(client):
    category_id = create(client).json()["id"]

    response = client.delete(f"/api/categories/{category_id}")

    assert response.status_code == 204
    assert client.get("/api/categories").json() == []
    assert client.delete(f"/api/categories/{category_id}").status_code == 404


def test_duplicate_name_fails_in_database(db_client):
    create(db_client)

    response = create(db_client)

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to create category"}


def test_duplicate_name_allowed_in_memory(memory_client):
    create(memory_client)

    assert create(memory_client).status_code == 201
    assert len(memory_client.get("/api/categories").json()) == 2


class BrokenStorage(MemoryStorage):
    def list_categories(self):
        raise StorageError("connection refused by db.internal:5432")


def test_storage_fault_is_a_500_without_detail():
    app.dependency_overrides[get_storage] = lambda: BrokenStorage()
    client = TestClient(app)
    try:
        response = client.get("/api/categories")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch categories"}


def test_update_with_non_finite_budget_is_rejected(client):
    category_id = create(client).json()["id"]

    for value in ("NaN", "Infinity"):
        response = client.patch(
            f"/api/categories/{category_id}",
            content=f'{{"monthlyBudget": {value}}}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400, value
        assert response.json()["message"] == "Invalid update data"
    assert client.get("/api/categories").json()[0]["monthlyBudget"] == 5900
