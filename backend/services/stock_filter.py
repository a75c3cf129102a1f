from typing import Iterable, List

from models.stock import StockItem
from services.stock_aggregation import ALL_CATEGORIES


def matches(item: StockItem, search_term: str = "", category_filter: str = ALL_CATEGORIES) -> bool:
    """Case-insensitive name/SKU substring match combined with an exact category match"""
    term = (search_term or "").lower()
    matches_search = term in item.name.lower() or term in item.sku.lower()
    matches_category = category_filter == ALL_CATEGORIES or item.category == category_filter
    return matches_search and matches_category


def filter_items(
    items: Iterable[StockItem],
    search_term: str = "",
    category_filter: str = ALL_CATEGORIES,
) -> List[StockItem]:
    return [item for item in items if matches(item, search_term, category_filter)]
