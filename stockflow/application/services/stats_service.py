from dataclasses import dataclass

from ..ports.notification_repo import NotificationRepository
from ..ports.product_repo import ProductRepository
from .stock import is_low


@dataclass
class StatsDto:
    total_products: int
    low_stock_items: int
    total_value: float
    unread_notifications: int


@dataclass
class StatsService:
    product_repo: ProductRepository
    notification_repo: NotificationRepository

    def get_stats(self, user_id: int) -> StatsDto:
        products = self.product_repo.list_all()
        return StatsDto(
            total_products=len(products),
            low_stock_items=sum(1 for p in products if is_low(p.stock_quantity, p.min_stock)),
            total_value=sum(p.stock_quantity * p.price for p in products) or 0,
            unread_notifications=self.notification_repo.count_unread(user_id),
        )
