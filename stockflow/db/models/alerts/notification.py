# stockflow/db/models/alerts/notification.py
from typing import Optional
from sqlalchemy import Index, text
from sqlmodel import SQLModel, Field
from datetime import datetime

LOW_STOCK = "low_stock"

class Notification(SQLModel, table=True):
    __tablename__ = "notifications"
    # At most one unread alert per (user, product, type)
    __table_args__ = (
        Index(
            "uq_notifications_open_alert",
            "user_id",
            "product_id",
            "type",
            unique=True,
            sqlite_where=text("is_read = 0"),
            postgresql_where=text("is_read = false"),
        ),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    product_id: Optional[int] = Field(default=None, foreign_key="products.id")
    type: str = Field(max_length=50)
    title: str
    message: str
    is_read: bool = Field(default=False)
    is_sent: bool = Field(default=False)
    created_at: datetime = Field(default_factory=datetime.utcnow)
