from dataclasses import dataclass
from typing import Protocol, List, Optional, Iterable
from datetime import datetime


@dataclass
class NotificationDto:
    id: int
    user_id: int
    product_id: Optional[int]
    type: str
    title: str
    message: str
    is_read: bool
    is_sent: bool
    created_at: datetime


class NotificationRepository(Protocol):
    def find_open(self, user_id: int, product_id: int, type: str) -> Optional[NotificationDto]:
        ...

    def create(self, user_id: int, product_id: Optional[int], type: str, title: str, message: str) -> Optional[NotificationDto]:
        """Returns None when an open notification for the same key already exists."""
        ...

    def mark_sent(self, notification_ids: Iterable[int]) -> int:
        ...

    def list_for_user(self, user_id: int, unread_only: bool = False, limit: int = 50, offset: int = 0) -> List[NotificationDto]:
        ...

    def mark_read(self, notification_id: int, user_id: int) -> bool:
        ...

    def mark_all_read(self, user_id: int) -> int:
        ...

    def delete(self, notification_id: int, user_id: int) -> bool:
        ...

    def count_unread(self, user_id: int) -> int:
        ...
