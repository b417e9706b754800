from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy import or_
from sqlmodel import Session, select

from .....db.models import User
from .....application.ports.user_repo import UserRepository, UserDto, RecipientDto

class SqlUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, user: User) -> UserDto:
        return UserDto(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password,
            email_notifications=bool(user.email_notifications),
            created_at=user.created_at,
        )

    def get_by_id(self, user_id: int) -> Optional[UserDto]:
        user = self.session.get(User, user_id)
        return self._to_dto(user) if user else None

    def get_by_username(self, username: str) -> Optional[UserDto]:
        user = self.session.exec(select(User).where(User.username == username)).first()
        return self._to_dto(user) if user else None

    def exists(self, username: str, email: str) -> bool:
        user = self.session.exec(
            select(User).where(or_(User.username == username, User.email == email))
        ).first()
        return user is not None

    def create(self, username: str, email: str, password_hash: str) -> Optional[UserDto]:
        user = User(username=username, email=email, password=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return None
        self.session.refresh(user)
        return self._to_dto(user)

    def get_recipient(self, user_id: int) -> Optional[RecipientDto]:
        user = self.session.get(User, user_id)
        if not user:
            return None
        return RecipientDto(
            id=user.id,
            email=user.email,
            username=user.username,
            email_notifications=bool(user.email_notifications),
        )

    def set_email_notifications(self, user_id: int, enabled: bool) -> bool:
        user = self.session.get(User, user_id)
        if not user:
            return False
        user.email_notifications = enabled
        self.session.add(user)
        self.session.commit()
        return True
