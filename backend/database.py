import logging

from config import SEED_SAMPLE_DATA
from services.stock_store import StockStore
from services.sample_data import SAMPLE_STOCK

logger = logging.getLogger(__name__)

# The one store the running app serves; tests build their own
store = StockStore()


def seed_store(target: StockStore = None):
    """Reset the store to the sample inventory when seeding is enabled"""
    target = target if target is not None else store
    if not SEED_SAMPLE_DATA:
        logger.info("[Store] Sample data disabled, starting empty")
        return
    target.clear()
    target.load(SAMPLE_STOCK)
    logger.info(f"[Store] Loaded {len(target)} sample stock items")
