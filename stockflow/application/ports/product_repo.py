from dataclasses import dataclass
from typing import Protocol, List, Optional
from datetime import datetime


@dataclass
class ProductInput:
    name: str
    sku: str
    sector_id: int
    price: float
    stock_quantity: int
    min_stock: int = 10
    description: Optional[str] = None


@dataclass
class ProductDto:
    id: int
    name: str
    sku: str
    description: Optional[str]
    sector_id: int
    price: float
    stock_quantity: int
    min_stock: int
    created_by: int
    created_at: datetime
    sector_name: Optional[str] = None
    sector_icon: Optional[str] = None
    created_by_name: Optional[str] = None


class ProductRepository(Protocol):
    def get_by_id(self, product_id: int) -> Optional[ProductDto]:
        ...

    def find_id_by_sku(self, sku: str, exclude_id: Optional[int] = None) -> Optional[int]:
        """Id of a product whose normalized SKU equals ``sku``, ignoring ``exclude_id``."""
        ...

    def create(self, data: ProductInput, created_by: int) -> ProductDto:
        """Insert a row; raises DuplicateSKU when the store rejects the SKU."""
        ...

    def update(self, product_id: int, data: ProductInput) -> bool:
        """Returns False when no row matched."""
        ...

    def delete(self, product_id: int) -> bool:
        """Deletes the product with its notifications and watchlist rows."""
        ...

    def list_all(self) -> List[ProductDto]:
        ...
