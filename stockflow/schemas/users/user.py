# stockflow/schemas/users/user.py
from pydantic import BaseModel
from datetime import datetime

class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    email_notifications: bool
    created_at: datetime

class UpdatePreferencesRequest(BaseModel):
    email_notifications: bool
