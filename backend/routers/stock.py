from fastapi import APIRouter, HTTPException, Depends, Query

from models.stock import StockItem, StockItemCreate, StockItemUpdate, StockAdjustment
from services.stock_store import StockStore, InvalidStockItemError
from services.stock_aggregation import (
    ALL_CATEGORIES, category_options, item_value, stock_status
)
from services.stock_filter import filter_items
from services.stock_mutations import adjust_quantity, edit_item
from services.sample_data import FORM_CATEGORIES
from dependencies import get_store

router = APIRouter(prefix="/stock", tags=["stock"])


def serialize_item(item: StockItem) -> dict:
    doc = item.model_dump()
    doc["last_updated"] = item.last_updated.isoformat()
    doc["status"] = stock_status(item)
    doc["total_value"] = round(item_value(item), 2)
    return doc


@router.get("")
async def get_stock(
    search: str = Query("", description="Search term for name or SKU"),
    category: str = Query(ALL_CATEGORIES, description="Category filter, 'all' for every category"),
    store: StockStore = Depends(get_store)
):
    """List stock items matching the search term and category"""
    items = filter_items(store.list(), search, category)
    return {
        "items": [serialize_item(item) for item in items],
        "total_count": len(items)
    }


@router.get("/categories")
async def get_stock_categories(store: StockStore = Depends(get_store)):
    """Filter choices plus the categories offered by the add form"""
    return {
        "categories": category_options(store.list()),
        "form_categories": FORM_CATEGORIES
    }


@router.post("")
async def create_stock_item(item_data: StockItemCreate, store: StockStore = Depends(get_store)):
    """Create a new stock item"""
    try:
        item = store.add(item_data)
    except InvalidStockItemError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Item created", "item": serialize_item(item)}


@router.get("/{item_id}")
async def get_stock_item(item_id: str, store: StockStore = Depends(get_store)):
    """Get a single stock item"""
    item = store.get(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return serialize_item(item)


@router.put("/{item_id}")
async def update_stock_item(item_id: str, item_data: StockItemUpdate, store: StockStore = Depends(get_store)):
    """Edit a stock item; unknown ids are ignored"""
    changes = item_data.model_dump(exclude_unset=True, exclude_none=True)
    item = edit_item(store, item_id, changes)
    return {
        "message": "Item updated" if item else "Item not found, nothing updated",
        "updated": item is not None,
        "item": serialize_item(item) if item else None
    }


@router.delete("/{item_id}")
async def delete_stock_item(item_id: str, store: StockStore = Depends(get_store)):
    """Delete a stock item; unknown ids are ignored"""
    deleted = store.delete(item_id)
    return {"message": "Item deleted" if deleted else "Item not found, nothing deleted", "deleted": deleted}


@router.put("/{item_id}/adjust")
async def adjust_stock_quantity(item_id: str, adjustment: StockAdjustment, store: StockStore = Depends(get_store)):
    """Add or remove stock; removals never go below zero"""
    before = store.get(item_id)
    if not before:
        raise HTTPException(status_code=404, detail="Item not found")

    item = adjust_quantity(store, item_id, adjustment.type, adjustment.quantity)
    return {
        "message": "Quantity adjusted" if adjustment.quantity > 0 else "Nothing to adjust",
        "adjusted": adjustment.quantity > 0,
        "new_quantity": item.quantity
    }
