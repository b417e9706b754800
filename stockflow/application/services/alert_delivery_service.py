import logging
from dataclasses import dataclass

from ...exceptions import DeliveryFailure
from ..ports.notification_repo import NotificationRepository
from ..ports.notifier import AlertDelivery, Notifier

logger = logging.getLogger(__name__)


@dataclass
class AlertDeliveryService:
    notifier: Notifier
    notification_repo: NotificationRepository

    def deliver(self, delivery: AlertDelivery) -> bool:
        """Single best-effort attempt; the notification row is kept either way."""
        try:
            self.notifier.send(delivery.recipient, delivery.subject, delivery.html_body, delivery.text_body)
        except DeliveryFailure as e:
            logger.warning(f"Email for notification {delivery.notification_id} not delivered: {e.reason}")
            return False
        self.notification_repo.mark_sent([delivery.notification_id])
        logger.info(f"Email sent for notification {delivery.notification_id}")
        return True
