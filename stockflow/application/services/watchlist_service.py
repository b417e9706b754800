import logging
from dataclasses import dataclass
from typing import List

from ...exceptions import NotFound
from ..ports.product_repo import ProductRepository, ProductDto
from ..ports.watchlist_repo import WatchlistRepository
from .low_stock_service import LowStockAlertService

logger = logging.getLogger(__name__)


@dataclass
class WatchlistService:
    repo: WatchlistRepository
    product_repo: ProductRepository
    alerts: LowStockAlertService

    def watch(self, user_id: int, product_id: int) -> bool:
        if not self.product_repo.get_by_id(product_id):
            raise NotFound("Product not found")
        added = self.repo.add(user_id, product_id)
        if added:
            logger.info(f"User {user_id} now watching product {product_id}")
            self.alerts.notify_if_low_stock(product_id)
        return added

    def unwatch(self, user_id: int, product_id: int) -> None:
        if not self.repo.remove(user_id, product_id):
            raise NotFound("Product is not on your watchlist")

    def list_watched(self, user_id: int) -> List[ProductDto]:
        products = []
        for product_id in self.repo.list_product_ids(user_id):
            product = self.product_repo.get_by_id(product_id)
            if product:
                products.append(product)
        return products
