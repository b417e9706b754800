# stockflow/db/models/users/user.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime

class User(SQLModel, table=True):
    __tablename__ = "users"
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=50, unique=True, index=True)
    email: str = Field(max_length=100, unique=True, index=True)
    password: str = Field(max_length=255)
    email_notifications: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
