from dataclasses import dataclass
from typing import List

from ...exceptions import NotFound
from ..ports.notification_repo import NotificationRepository, NotificationDto


@dataclass
class InboxService:
    repo: NotificationRepository

    def list_for_user(self, user_id: int, unread_only: bool = False, limit: int = 50, offset: int = 0) -> List[NotificationDto]:
        return self.repo.list_for_user(user_id, unread_only=unread_only, limit=limit, offset=offset)

    def mark_read(self, user_id: int, notification_id: int) -> None:
        # Acknowledging an alert re-enables low-stock alerts for its product
        if not self.repo.mark_read(notification_id, user_id):
            raise NotFound("Notification not found")

    def mark_all_read(self, user_id: int) -> int:
        return self.repo.mark_all_read(user_id)

    def delete(self, user_id: int, notification_id: int) -> None:
        if not self.repo.delete(notification_id, user_id):
            raise NotFound("Notification not found")
