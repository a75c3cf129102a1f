import pytest
from fastapi.testclient import TestClient

from services.stock_store import StockStore
from services.sample_data import SAMPLE_STOCK


@pytest.fixture
def store():
    """Fresh store holding the four sample items"""
    s = StockStore()
    s.load(SAMPLE_STOCK)
    return s


@pytest.fixture
def empty_store():
    return StockStore()


@pytest.fixture
def client(store):
    """API client wired to the per-test store"""
    from server import app
    from dependencies import get_store

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def by_sku(items, sku):
    return next(item for item in items if item.sku == sku)
