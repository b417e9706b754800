from dataclasses import dataclass

from ...exceptions import NotFound
from ..ports.user_repo import UserRepository, UserDto


@dataclass
class ProfileService:
    user_repo: UserRepository

    def get_profile(self, user_id: int) -> UserDto:
        user = self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        return user

    def set_email_notifications(self, user_id: int, enabled: bool) -> UserDto:
        if not self.user_repo.set_email_notifications(user_id, enabled):
            raise NotFound("User not found")
        return self.get_profile(user_id)
