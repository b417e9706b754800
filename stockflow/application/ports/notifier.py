from dataclasses import dataclass
from typing import Protocol


@dataclass
class AlertDelivery:
    notification_id: int
    recipient: str
    subject: str
    html_body: str
    text_body: str


class Notifier(Protocol):
    def send(self, recipient: str, subject: str, html_body: str, text_body: str) -> None:
        """Deliver one message; raises DeliveryFailure on any channel error."""
        ...


class AlertDispatcher(Protocol):
    def dispatch(self, delivery: AlertDelivery) -> None:
        """Hand a delivery off; must not block on the external channel."""
        ...
