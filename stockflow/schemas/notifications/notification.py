# stockflow/schemas/notifications/notification.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class NotificationResponse(BaseModel):
    id: int
    product_id: Optional[int] = None
    type: str
    title: str
    message: str
    is_read: bool
    is_sent: bool
    created_at: datetime

class MarkAllReadResponse(BaseModel):
    success: bool
    message: str
    updated_count: int
