import logging
from typing import Callable

from fastapi import BackgroundTasks
from sqlmodel import Session

from ...application.ports.notifier import AlertDelivery, AlertDispatcher, Notifier
from ...application.services.alert_delivery_service import AlertDeliveryService
from ..persistence.sqlalchemy.repositories.notification_repository_sql import SqlNotificationRepository

logger = logging.getLogger(__name__)


class BackgroundAlertDispatcher(AlertDispatcher):
    """Runs each delivery as a FastAPI background task after the response is sent."""

    def __init__(self, background_tasks: BackgroundTasks, notifier: Notifier, session_factory: Callable[[], Session]):
        self.background_tasks = background_tasks
        self.notifier = notifier
        self.session_factory = session_factory

    def dispatch(self, delivery: AlertDelivery) -> None:
        self.background_tasks.add_task(self._deliver, delivery)

    def _deliver(self, delivery: AlertDelivery) -> None:
        # The request session is closed by now; bookkeeping gets its own
        with self.session_factory() as session:
            AlertDeliveryService(self.notifier, SqlNotificationRepository(session)).deliver(delivery)


class InlineAlertDispatcher(AlertDispatcher):
    """Delivers immediately through the given service (scripts and tests)."""

    def __init__(self, delivery_service: AlertDeliveryService):
        self.delivery_service = delivery_service

    def dispatch(self, delivery: AlertDelivery) -> None:
        self.delivery_service.deliver(delivery)


class DisabledAlertDispatcher(AlertDispatcher):
    def dispatch(self, delivery: AlertDelivery) -> None:
        logger.info(f"Email delivery disabled; notification {delivery.notification_id} kept in-app only")
