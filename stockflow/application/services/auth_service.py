import logging
from dataclasses import dataclass
from typing import Any, Dict

from ...exceptions import Unauthorized, ValidationError
from ...utils import create_jwt_token, hash_password, verify_password
from ..ports.user_repo import UserRepository, UserDto

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    user_repo: UserRepository

    def register(self, username: str, email: str, password: str) -> UserDto:
        if self.user_repo.exists(username, email):
            raise ValidationError("Username or email already exists")
        user = self.user_repo.create(username, email, hash_password(password))
        if not user:
            raise ValidationError("Username or email already exists")
        logger.info(f"Registered user {user.id}")
        return user

    def login(self, username: str, password: str) -> Dict[str, Any]:
        user = self.user_repo.get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for username {username!r}")
            raise Unauthorized("Invalid credentials")
        token = create_jwt_token({"sub": str(user.id), "username": user.username})
        return {
            "token": token,
            "user": {"id": user.id, "username": user.username, "email": user.email},
        }
