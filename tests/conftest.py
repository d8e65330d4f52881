from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_store
from app.main import app
from app.models import SalesRecord
from app.services.store import RecordStore

REGIONS = ["North", "South", "East", "West"]
PRODUCTS = ["Gadget", "Widget", "Doohickey", "Apparel"]


def make_store(records=None, days=30, seed=7):
    return RecordStore(
        days=days, regions=REGIONS, products=PRODUCTS, seed=seed,
        end_date=date(2025, 3, 31), records=records,
    )


@pytest.fixture
def store_factory():
    """Build a store ending 2025-03-31; keyword overrides go to ``make_store``."""
    return make_store


@pytest.fixture
def store():
    """Seeded 30-day store ending 2025-03-31."""
    return make_store()


@pytest.fixture
def two_record_store():
    return make_store(records=[
        SalesRecord(id=1, date="2025-01-01", region="North", product="Gadget", sales=100, profit=20),
        SalesRecord(id=2, date="2025-01-02", region="South", product="Widget", sales=300, profit=90),
    ])


def _client_for(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def client(store):
    yield from _client_for(store)


@pytest.fixture
def small_client(two_record_store):
    yield from _client_for(two_record_store)
