import pytest
from fastapi.testclient import TestClient

from budget_tracker.database import create_database_engine
from budget_tracker.main import app
from budget_tracker.storage import DatabaseStorage, MemoryStorage, get_storage


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def db_storage():
    storage = DatabaseStorage(create_database_engine("sqlite://"))
    yield storage
    storage.close()


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Each storage-contract test runs once per backend."""
    name = {"memory": "memory_storage", "database": "db_storage"}[request.param]
    return request.getfixturevalue(name)


def make_client(storage) -> TestClient:
    app.dependency_overrides[get_storage] = lambda: storage
    return TestClient(app)


@pytest.fixture
def client(storage):
    yield make_client(storage)
    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(memory_storage):
    yield make_client(memory_storage)
    app.dependency_overrides.clear()


@pytest.fixture
def db_client(db_storage):
    yield make_client(db_storage)
    app.dependency_overrides.clear()
