"""
Quantity adjustments and field edits, written through a StockStore.
"""
import logging
from typing import Any, Mapping, Optional, Union

from models.stock import AdjustmentType, StockItem
from services.stock_store import StockStore

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "sku", "category", "min_stock", "max_stock", "unit_price", "supplier")


def adjusted_quantity(current: int, adjustment_type: Union[AdjustmentType, str], magnitude: int) -> int:
    """New quantity after an adjustment. Removals floor at zero, additions are unbounded."""
    if magnitude < 0:
        raise ValueError("Adjustment quantity must not be negative")
    if AdjustmentType(adjustment_type) == AdjustmentType.ADD:
        return current + magnitude
    return max(0, current - magnitude)


def adjust_quantity(
    store: StockStore,
    item_id: str,
    adjustment_type: Union[AdjustmentType, str],
    magnitude: int,
) -> Optional[StockItem]:
    """Apply an add/remove adjustment.

    Returns the resulting item, or None when the id is unknown. A zero
    magnitude leaves the item (and its last_updated) untouched.
    """
    item = store.get(item_id)
    if item is None:
        return None

    new_quantity = adjusted_quantity(item.quantity, adjustment_type, magnitude)
    if magnitude == 0:
        return item

    logger.info(f"Adjusting {item_id}: {item.quantity} -> {new_quantity}")
    return store.update(item_id, {"quantity": new_quantity})


def edit_item(store: StockStore, item_id: str, changes: Mapping[str, Any]) -> Optional[StockItem]:
    """Overwrite any subset of the editable fields in one update"""
    fields = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
    return store.update(item_id, fields)
