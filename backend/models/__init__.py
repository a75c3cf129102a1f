from models.stock import (
    AdjustmentType, StockItem, StockItemCreate, StockItemUpdate, StockAdjustment
)

__all__ = [
    "AdjustmentType",
    "StockItem", "StockItemCreate", "StockItemUpdate", "StockAdjustment"
]
