from database import store
from services.stock_store import StockStore


def get_store() -> StockStore:
    """Store used by request handlers; override in tests via app.dependency_overrides"""
    return store
