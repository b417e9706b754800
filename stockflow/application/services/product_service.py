import logging
import math
from dataclasses import dataclass, replace
from typing import List

from ...exceptions import DuplicateSKU, NotFound, Unauthorized, ValidationError
from ...utils import normalize_sku
from ..ports.product_repo import ProductRepository, ProductInput, ProductDto
from ..ports.sector_repo import SectorRepository
from ..ports.user_repo import UserRepository
from .low_stock_service import LowStockAlertService
from .stock import is_low

logger = logging.getLogger(__name__)


@dataclass
class ProductService:
    repo: ProductRepository
    sector_repo: SectorRepository
    user_repo: UserRepository
    alerts: LowStockAlertService

    def create_product(self, user_id: int, data: ProductInput) -> ProductDto:
        if not self.user_repo.get_by_id(user_id):
            raise Unauthorized("Unknown user")
        data = self._validate(data)
        if self.repo.find_id_by_sku(data.sku) is not None:
            raise DuplicateSKU(data.sku)

        product = self.repo.create(data, created_by=user_id)
        logger.info(f"Product {product.id} created with SKU {product.sku}")

        if is_low(product.stock_quantity, product.min_stock):
            self.alerts.notify_if_low_stock(product.id)
        return product

    def update_product(self, product_id: int, data: ProductInput) -> None:
        data = self._validate(data)
        if self.repo.find_id_by_sku(data.sku, exclude_id=product_id) is not None:
            raise DuplicateSKU(data.sku)
        if not self.repo.update(product_id, data):
            raise NotFound("Product not found")
        logger.info(f"Product {product_id} updated")

        if is_low(data.stock_quantity, data.min_stock):
            self.alerts.notify_if_low_stock(product_id)

    def delete_product(self, product_id: int) -> None:
        if not self.repo.delete(product_id):
            raise NotFound("Product not found")
        logger.info(f"Product {product_id} deleted")

    def get_product(self, product_id: int) -> ProductDto:
        product = self.repo.get_by_id(product_id)
        if not product:
            raise NotFound("Product not found")
        return product

    def list_products(self) -> List[ProductDto]:
        return sorted(self.repo.list_all(), key=lambda p: (p.created_at, p.id), reverse=True)

    def list_low_stock_products(self) -> List[ProductDto]:
        low = [p for p in self.repo.list_all() if is_low(p.stock_quantity, p.min_stock)]
        return sorted(low, key=lambda p: (p.stock_quantity, p.id))

    def list_skus(self) -> List[dict]:
        return [
            {"id": p.id, "name": p.name, "sku": p.sku, "normalized_sku": normalize_sku(p.sku)}
            for p in sorted(self.repo.list_all(), key=lambda p: p.id)
        ]

    def _validate(self, data: ProductInput) -> ProductInput:
        if not data.name or not data.name.strip():
            raise ValidationError("Product name is required")
        if data.sku is None or not normalize_sku(data.sku):
            raise ValidationError("Product SKU is required")
        for field in ("price", "stock_quantity", "min_stock"):
            value = getattr(data, field)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"{field} must be numeric")
            if not math.isfinite(value):
                raise ValidationError(f"{field} must be numeric")
        if data.price <= 0:
            raise ValidationError("price must be greater than 0")
        if data.stock_quantity < 0:
            raise ValidationError("stock_quantity cannot be negative")
        if data.min_stock < 0:
            raise ValidationError("min_stock cannot be negative")
        if not self.sector_repo.get_by_id(data.sector_id):
            raise ValidationError("Unknown sector")
        return replace(data, name=data.name.strip(), sku=normalize_sku(data.sku))
