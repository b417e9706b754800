# stockflow/db/models/catalog/product.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime

class Product(SQLModel, table=True):
    __tablename__ = "products"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    # Always stored normalized (trimmed, uppercased)
    sku: str = Field(max_length=100, unique=True, index=True)
    description: Optional[str] = Field(default=None)
    sector_id: int = Field(foreign_key="sectors.id")
    price: float
    stock_quantity: int
    min_stock: int = Field(default=10)
    created_by: int = Field(foreign_key="users.id")
    created_at: datetime = Field(default_factory=datetime.utcnow)
