"""
Shared pytest fixtures — fresh receipt stores + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from app.database import create_db_engine
from app.main import app
from app.routers.receipts import get_store
from app.schemas import Receipt
from app.store import MemoryReceiptStore, SqlReceiptStore

SCENARIO_A = {
    "retailer": "Target",
    "purchaseDate": "2022-03-02",
    "purchaseTime": "13:01",
    "total": "10.00",
    "items": [
        {"shortDescription": "abc", "price": "3.00"},
        {"shortDescription": "abcdef", "price": "6.00"},
    ],
}


def make_receipt(**overrides) -> Receipt:
    """Scenario A receipt with selected wire fields replaced."""
    return Receipt.model_validate({**SCENARIO_A, **overrides})


@pytest.fixture()
def receipt():
    return make_receipt()


@pytest.fixture()
def memory_store():
    return MemoryReceiptStore()


@pytest.fixture()
def sql_store():
    store = SqlReceiptStore(create_db_engine("sqlite://"))
    yield store
    store.close()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture()
def client(memory_store):
    app.dependency_overrides[get_store] = lambda: memory_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
