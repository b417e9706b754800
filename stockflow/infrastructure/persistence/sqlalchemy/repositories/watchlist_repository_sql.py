from typing import List
from sqlmodel import Session, select

from .....db.models import User, WatchlistEntry
from .....application.ports.user_repo import RecipientDto
from .....application.ports.watchlist_repo import WatchlistRepository

class SqlWatchlistRepository(WatchlistRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, user_id: int, product_id: int) -> bool:
        if self.session.get(WatchlistEntry, (user_id, product_id)):
            return False
        self.session.add(WatchlistEntry(user_id=user_id, product_id=product_id))
        self.session.commit()
        return True

    def remove(self, user_id: int, product_id: int) -> bool:
        entry = self.session.get(WatchlistEntry, (user_id, product_id))
        if not entry:
            return False
        self.session.delete(entry)
        self.session.commit()
        return True

    def list_product_ids(self, user_id: int) -> List[int]:
        return list(self.session.exec(
            select(WatchlistEntry.product_id)
            .where(WatchlistEntry.user_id == user_id)
            .order_by(WatchlistEntry.created_at)
        ).all())

    def list_watchers(self, product_id: int) -> List[RecipientDto]:
        users = self.session.exec(
            select(User)
            .join(WatchlistEntry, WatchlistEntry.user_id == User.id)
            .where(WatchlistEntry.product_id == product_id)
        ).all()
        return [
            RecipientDto(id=u.id, email=u.email, username=u.username, email_notifications=bool(u.email_notifications))
            for u in users
        ]
