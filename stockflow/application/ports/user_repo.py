from dataclasses import dataclass
from typing import Protocol, Optional
from datetime import datetime


@dataclass
class UserDto:
    id: int
    username: str
    email: str
    password_hash: str
    email_notifications: bool
    created_at: datetime


@dataclass(frozen=True)
class RecipientDto:
    id: int
    email: str
    username: str
    email_notifications: bool


class UserRepository(Protocol):
    def get_by_id(self, user_id: int) -> Optional[UserDto]:
        ...

    def get_by_username(self, username: str) -> Optional[UserDto]:
        ...

    def exists(self, username: str, email: str) -> bool:
        ...

    def create(self, username: str, email: str, password_hash: str) -> Optional[UserDto]:
        ...

    def get_recipient(self, user_id: int) -> Optional[RecipientDto]:
        ...

    def set_email_notifications(self, user_id: int, enabled: bool) -> bool:
        ...
