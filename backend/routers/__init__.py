from routers.stock import router as stock_router
from routers.reports import router as reports_router

__all__ = [
    "stock_router",
    "reports_router"
]
