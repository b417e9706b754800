import logging
from dataclasses import dataclass
from html import escape
from typing import List

from ...db.models import LOW_STOCK
from ..ports.notification_repo import NotificationRepository, NotificationDto
from ..ports.notifier import AlertDelivery, AlertDispatcher
from ..ports.product_repo import ProductRepository, ProductDto
from ..ports.user_repo import RecipientDto
from .recipient_resolver import RecipientResolver
from .stock import is_low

logger = logging.getLogger(__name__)


def low_stock_title(product: ProductDto) -> str:
    return f"Low Stock Alert: {product.name}"


def low_stock_message(product: ProductDto) -> str:
    return (
        f'Product "{product.name}" ({product.sku}) is running low. '
        f"Current stock: {product.stock_quantity}, Minimum: {product.min_stock}"
    )


def render_low_stock_email(product: ProductDto, title: str, message: str) -> str:
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <div style="background: #667eea; color: white; padding: 20px; text-align: center;">
        <h1>StockFlow Alert</h1>
      </div>
      <div style="padding: 20px; background: #f8f9fa;">
        <h2 style="color: #ef4444;">{escape(title)}</h2>
        <p>{escape(message)}</p>
        <div style="background: white; padding: 15px; border-radius: 8px; margin: 15px 0;">
          <strong>Product Details:</strong><br>
          Name: {escape(product.name)}<br>
          SKU: {escape(product.sku)}<br>
          Current Stock: {product.stock_quantity}<br>
          Minimum Stock: {product.min_stock}
        </div>
        <p>Please restock this item to avoid stockouts.</p>
      </div>
      <div style="background: #333; color: white; padding: 10px; text-align: center; font-size: 12px;">
        StockFlow Inventory Management System
      </div>
    </div>
    """


@dataclass
class LowStockAlertService:
    """Creates at most one open low-stock alert per recipient and product."""

    product_repo: ProductRepository
    notification_repo: NotificationRepository
    resolver: RecipientResolver
    dispatcher: AlertDispatcher

    def notify_if_low_stock(self, product_id: int) -> List[NotificationDto]:
        product = self.product_repo.get_by_id(product_id)
        if not product or not is_low(product.stock_quantity, product.min_stock):
            return []

        created = []
        for recipient in self.resolver.resolve(product):
            notification = self._create_alert(product, recipient)
            if notification is None:
                continue
            created.append(notification)
            if recipient.email_notifications:
                self.dispatcher.dispatch(AlertDelivery(
                    notification_id=notification.id,
                    recipient=recipient.email,
                    subject=notification.title,
                    html_body=render_low_stock_email(product, notification.title, notification.message),
                    text_body=notification.message,
                ))
        return created

    def _create_alert(self, product: ProductDto, recipient: RecipientDto):
        if self.notification_repo.find_open(recipient.id, product.id, LOW_STOCK):
            logger.debug(f"Open low-stock alert exists for user {recipient.id}, product {product.id}")
            return None
        notification = self.notification_repo.create(
            user_id=recipient.id,
            product_id=product.id,
            type=LOW_STOCK,
            title=low_stock_title(product),
            message=low_stock_message(product),
        )
        if notification:
            logger.info(f"Low-stock alert {notification.id} created for user {recipient.id}, product {product.id}")
        return notification
