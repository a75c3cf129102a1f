"""
Derived views over a snapshot of stock items.

Everything here is a pure function of the list it is given and is recomputed
in full on every call. Sorting relies on sorted() being stable, so ties keep
store order.
"""
from typing import Dict, Iterable, List, Optional

from models.stock import StockItem

ALL_CATEGORIES = "all"

STATUS_LOW = "Low"
STATUS_HIGH = "High"
STATUS_NORMAL = "Normal"


def item_value(item: StockItem) -> float:
    return item.quantity * item.unit_price


def total_value(items: Iterable[StockItem]) -> float:
    return sum(item_value(item) for item in items)


def is_low_stock(item: StockItem) -> bool:
    return item.quantity <= item.min_stock


def is_high_stock(item: StockItem) -> bool:
    return item.quantity >= item.max_stock


def low_stock_items(items: Iterable[StockItem]) -> List[StockItem]:
    return [item for item in items if is_low_stock(item)]


def high_stock_items(items: Iterable[StockItem]) -> List[StockItem]:
    return [item for item in items if is_high_stock(item)]


def stock_status(item: StockItem) -> str:
    """Badge shown in the inventory table; low takes precedence over high"""
    if is_low_stock(item):
        return STATUS_LOW
    if is_high_stock(item):
        return STATUS_HIGH
    return STATUS_NORMAL


def summary_totals(items: List[StockItem]) -> dict:
    return {
        "total_items": len(items),
        "total_value": total_value(items),
        "category_count": len({item.category for item in items}),
        "low_stock_count": len(low_stock_items(items)),
    }


def category_counts(items: Iterable[StockItem]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for item in items:
        counts[item.category] = counts.get(item.category, 0) + 1
    return counts


def category_values(items: Iterable[StockItem]) -> Dict[str, float]:
    values: Dict[str, float] = {}
    for item in items:
        values[item.category] = values.get(item.category, 0) + item_value(item)
    return values


def category_breakdown(items: Iterable[StockItem]) -> List[dict]:
    """One row per category, in the order categories first appear"""
    rows: Dict[str, dict] = {}
    for item in items:
        row = rows.get(item.category)
        if row is None:
            row = rows[item.category] = {"category": item.category, "count": 0, "value": 0.0}
        row["count"] += 1
        row["value"] += item_value(item)
    return list(rows.values())


def category_value_ranking(items: Iterable[StockItem]) -> List[dict]:
    return sorted(category_breakdown(items), key=lambda row: row["value"], reverse=True)


def category_options(items: Iterable[StockItem]) -> List[str]:
    """Choices for the category filter: 'all' followed by each distinct category"""
    return [ALL_CATEGORIES] + list(dict.fromkeys(item.category for item in items))


def rank_by_value(items: Iterable[StockItem], limit: Optional[int] = None) -> List[StockItem]:
    ranked = sorted(items, key=item_value, reverse=True)
    return ranked if limit is None else ranked[:limit]


def top_value_items(items: Iterable[StockItem], limit: int = 5) -> List[StockItem]:
    return rank_by_value(items, limit)


def recent_updates(items: Iterable[StockItem], limit: Optional[int] = 5) -> List[StockItem]:
    ordered = sorted(items, key=lambda item: item.last_updated, reverse=True)
    return ordered if limit is None else ordered[:limit]


def fill_percentage(item: StockItem) -> float:
    """Quantity as a percentage of max_stock; 0.0 when max_stock is not positive"""
    if item.max_stock <= 0:
        return 0.0
    return item.quantity / item.max_stock * 100


def progress_percentage(item: StockItem) -> float:
    return min(100.0, max(0.0, fill_percentage(item)))


def average_stock_level(items: List[StockItem]) -> float:
    if not items:
        return 0.0
    return sum(item.quantity for item in items) / len(items)


def stock_level_series(items: Iterable[StockItem], limit: Optional[int] = None) -> List[dict]:
    """Bar chart rows in store order, optionally only the first `limit` items"""
    items = list(items)
    if limit is not None:
        items = items[:limit]
    return [
        {
            "name": item.name,
            "quantity": item.quantity,
            "min_stock": item.min_stock,
            "max_stock": item.max_stock,
        }
        for item in items
    ]
