"""
In-memory record store for stock items.

The store owns the ordered collection; every read hands out a fresh list so
callers can never reorder or shrink the collection behind the store's back.
Records themselves are frozen pydantic models and are replaced, not edited.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union

from models.stock import StockItem, StockItemCreate, new_stock_id

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("name", "sku", "category")
NUMERIC_FIELDS = ("quantity", "min_stock", "max_stock", "unit_price")
IMMUTABLE_FIELDS = ("id", "last_updated")


class InvalidStockItemError(ValueError):
    """Raised when an item is added without a name, SKU or category"""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"Missing required fields: {', '.join(missing)}")


class StockStore:
    def __init__(self):
        self._items: List[StockItem] = []
        self.version = 0

    def __len__(self) -> int:
        return len(self._items)

    def _touch(self):
        self.version += 1

    def _index_of(self, item_id: str) -> Optional[int]:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return None

    def _unique_id(self) -> str:
        existing = {item.id for item in self._items}
        item_id = new_stock_id()
        while item_id in existing:
            item_id = new_stock_id()
        return item_id

    def add(self, data: Union[StockItemCreate, Mapping[str, Any]]) -> StockItem:
        """Create an item from caller input and append it to the store"""
        if isinstance(data, StockItemCreate):
            data = data.model_dump()
        fields = {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}

        missing = [f for f in REQUIRED_TEXT_FIELDS if not fields.get(f)]
        if missing:
            raise InvalidStockItemError(missing)

        for f in NUMERIC_FIELDS:
            if fields.get(f) is None:
                fields[f] = 0
        if fields.get("supplier") is None:
            fields["supplier"] = ""

        item = StockItem(
            **fields,
            id=self._unique_id(),
            last_updated=datetime.now(timezone.utc),
        )
        self._items.append(item)
        self._touch()
        logger.info(f"Stock item created: {item.id} ({item.sku})")
        return item

    def update(self, item_id: str, changes: Mapping[str, Any]) -> Optional[StockItem]:
        """Overwrite the supplied fields and stamp last_updated. Unknown ids are ignored."""
        index = self._index_of(item_id)
        if index is None:
            logger.debug(f"Update skipped, no stock item {item_id}")
            return None

        current = self._items[index]
        fields = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        updated = StockItem(**{
            **current.model_dump(),
            **fields,
            "last_updated": datetime.now(timezone.utc),
        })
        self._items[index] = updated
        self._touch()
        return updated

    def delete(self, item_id: str) -> bool:
        index = self._index_of(item_id)
        if index is None:
            logger.debug(f"Delete skipped, no stock item {item_id}")
            return False
        del self._items[index]
        self._touch()
        logger.info(f"Stock item deleted: {item_id}")
        return True

    def get(self, item_id: str) -> Optional[StockItem]:
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    def list(self) -> List[StockItem]:
        return list(self._items)

    def clear(self):
        self._items = []
        self._touch()

    def load(self, records: List[Dict[str, Any]]) -> List[StockItem]:
        """Append prepared records, keeping any last_updated they carry.

        Used for the sample inventory; ids are always assigned here.
        """
        loaded = []
        for record in records:
            item = StockItem(**{**record, "id": self._unique_id()})
            self._items.append(item)
            loaded.append(item)
        if loaded:
            self._touch()
        return loaded
