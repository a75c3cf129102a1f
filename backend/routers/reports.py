from fastapi import APIRouter, Depends

from config import REPORT_TOP_N, RECENT_UPDATES_LIMIT, STOCK_CHART_LIMIT
from services.stock_store import StockStore
from services.stock_aggregation import (
    average_stock_level,
    category_breakdown,
    category_counts,
    category_value_ranking,
    fill_percentage,
    high_stock_items,
    item_value,
    low_stock_items,
    is_high_stock,
    is_low_stock,
    progress_percentage,
    recent_updates,
    stock_level_series,
    summary_totals,
    top_value_items,
    total_value,
)
from dependencies import get_store

router = APIRouter(tags=["reports"])

# Palette cycled over category rows, in row order
CHART_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8"]


def _money(value: float) -> float:
    return round(value, 2)


def _brief(item) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "sku": item.sku,
        "category": item.category,
        "quantity": item.quantity,
        "min_stock": item.min_stock,
        "max_stock": item.max_stock,
        "last_updated": item.last_updated.isoformat()
    }


def _category_rows(rows):
    return [
        {**row, "value": _money(row["value"]), "color": CHART_COLORS[index % len(CHART_COLORS)]}
        for index, row in enumerate(rows)
    ]


@router.get("/stats/dashboard")
async def get_dashboard_stats(store: StockStore = Depends(get_store)):
    """Figures for the four summary cards"""
    totals = summary_totals(store.list())
    totals["total_value"] = _money(totals["total_value"])
    return totals


@router.get("/stats/overview")
async def get_stock_overview(store: StockStore = Depends(get_store)):
    """Low-stock alerts, stock levels, category distribution and recent updates"""
    items = store.list()

    stock_levels = []
    for item in items:
        stock_levels.append({
            "id": item.id,
            "name": item.name,
            "quantity": item.quantity,
            "max_stock": item.max_stock,
            "fill_percent": round(fill_percentage(item), 1),
            "progress": round(progress_percentage(item), 1),
            "is_low": is_low_stock(item),
            "is_high": is_high_stock(item)
        })

    return {
        "low_stock_alerts": [_brief(item) for item in low_stock_items(items)],
        "high_stock_items": [_brief(item) for item in high_stock_items(items)],
        "stock_levels": stock_levels,
        "category_distribution": category_counts(items),
        "recent_updates": [_brief(item) for item in recent_updates(items, RECENT_UPDATES_LIMIT)]
    }


@router.get("/reports")
async def get_stock_reports(store: StockStore = Depends(get_store)):
    """Data behind the reports tab charts and rankings"""
    items = store.list()

    top_items = []
    for item in top_value_items(items, REPORT_TOP_N):
        top_items.append({
            "id": item.id,
            "name": item.name,
            "sku": item.sku,
            "quantity": item.quantity,
            "unit_price": _money(item.unit_price),
            "total_value": _money(item_value(item))
        })

    return {
        "summary": {
            "total_value": _money(total_value(items)),
            "average_stock_level": round(average_stock_level(items)),
            "total_items": len(items),
            "category_count": len(category_counts(items))
        },
        "category_data": _category_rows(category_breakdown(items)),
        "stock_levels": stock_level_series(items, STOCK_CHART_LIMIT),
        "top_value_items": top_items,
        "category_values": _category_rows(category_value_ranking(items))
    }
