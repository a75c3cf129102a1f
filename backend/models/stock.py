from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime, timezone
from enum import Enum
import uuid


def new_stock_id() -> str:
    return f"stk_{uuid.uuid4().hex[:12]}"


class AdjustmentType(str, Enum):
    """Direction of a quantity adjustment"""
    ADD = "add"
    REMOVE = "remove"


class StockItem(BaseModel):
    """A stock record as held by the store. Instances are never mutated in place."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(default_factory=new_stock_id)
    name: str
    sku: str
    category: str
    quantity: int = 0
    min_stock: int = 0
    max_stock: int = 0
    unit_price: float = 0.0
    supplier: str = ""
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class StockItemCreate(BaseModel):
    """Payload of the add-stock form"""
    name: str
    sku: str
    category: str
    quantity: int = Field(0, ge=0)
    min_stock: int = Field(0, ge=0)
    max_stock: int = Field(0, ge=0)
    unit_price: float = Field(0.0, ge=0)
    supplier: str = ""


class StockItemUpdate(BaseModel):
    """Partial edit; only fields the caller sent are applied"""
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    min_stock: Optional[int] = Field(None, ge=0)
    max_stock: Optional[int] = Field(None, ge=0)
    unit_price: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = None


class StockAdjustment(BaseModel):
    type: AdjustmentType
    quantity: int = Field(..., ge=0)
