from typing import Iterable, List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Notification
from .....application.ports.notification_repo import NotificationRepository, NotificationDto

class SqlNotificationRepository(NotificationRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, n: Notification) -> NotificationDto:
        return NotificationDto(
            id=n.id,
            user_id=n.user_id,
            product_id=n.product_id,
            type=n.type,
            title=n.title,
            message=n.message,
            is_read=bool(n.is_read),
            is_sent=bool(n.is_sent),
            created_at=n.created_at,
        )

    def _owned(self, notification_id: int, user_id: int) -> Optional[Notification]:
        return self.session.exec(
            select(Notification)
            .where(Notification.id == notification_id)
            .where(Notification.user_id == user_id)
        ).first()

    def find_open(self, user_id: int, product_id: int, type: str) -> Optional[NotificationDto]:
        n = self.session.exec(
            select(Notification)
            .where(Notification.user_id == user_id)
            .where(Notification.product_id == product_id)
            .where(Notification.type == type)
            .where(Notification.is_read == False)  # noqa: E712
        ).first()
        return self._to_dto(n) if n else None

    def create(self, user_id: int, product_id: Optional[int], type: str, title: str, message: str) -> Optional[NotificationDto]:
        n = Notification(user_id=user_id, product_id=product_id, type=type, title=title, message=message)
        self.session.add(n)
        try:
            self.session.commit()
        except IntegrityError:
            # Lost the race against a concurrent writer for the same open alert
            self.session.rollback()
            return None
        self.session.refresh(n)
        return self._to_dto(n)

    def mark_sent(self, notification_ids: Iterable[int]) -> int:
        ids = list(notification_ids)
        if not ids:
            return 0
        rows = self.session.exec(select(Notification).where(Notification.id.in_(ids))).all()
        for n in rows:
            n.is_sent = True
            self.session.add(n)
        self.session.commit()
        return len(rows)

    def list_for_user(self, user_id: int, unread_only: bool = False, limit: int = 50, offset: int = 0) -> List[NotificationDto]:
        query = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            query = query.where(Notification.is_read == False)  # noqa: E712
        rows = self.session.exec(
            query.order_by(Notification.created_at.desc(), Notification.id.desc()).offset(offset).limit(limit)
        ).all()
        return [self._to_dto(n) for n in rows]

    def mark_read(self, notification_id: int, user_id: int) -> bool:
        n = self._owned(notification_id, user_id)
        if not n:
            return False
        n.is_read = True
        self.session.add(n)
        self.session.commit()
        return True

    def mark_all_read(self, user_id: int) -> int:
        unread = self.session.exec(
            select(Notification)
            .where(Notification.user_id == user_id)
            .where(Notification.is_read == False)  # noqa: E712
        ).all()
        for n in unread:
            n.is_read = True
            self.session.add(n)
        self.session.commit()
        return len(unread)

    def delete(self, notification_id: int, user_id: int) -> bool:
        n = self._owned(notification_id, user_id)
        if not n:
            return False
        self.session.delete(n)
        self.session.commit()
        return True

    def count_unread(self, user_id: int) -> int:
        return self.session.exec(
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id)
            .where(Notification.is_read == False)  # noqa: E712
        ).one()
