# stockflow/schemas/products/product.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from ...core.config import settings

class SectorResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: str

class ProductRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    sku: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    sector_id: int
    price: float = Field(..., gt=0, allow_inf_nan=False)
    stock_quantity: int = Field(..., ge=0)
    min_stock: int = Field(settings.DEFAULT_MIN_STOCK, ge=0)

class ProductResponse(BaseModel):
    id: int
    name: str
    sku: str
    description: Optional[str] = None
    sector_id: int
    price: float
    stock_quantity: int
    min_stock: int
    created_by: int
    created_at: datetime
    sector_name: Optional[str] = None
    sector_icon: Optional[str] = None
    created_by_name: Optional[str] = None

class ProductCreatedResponse(BaseModel):
    message: str
    id: int

class SkuDebugEntry(BaseModel):
    id: int
    name: str
    sku: str
    normalized_sku: str
