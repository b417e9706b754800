# stockflow/db/models/catalog/watchlist.py
from sqlmodel import SQLModel, Field
from datetime import datetime

class WatchlistEntry(SQLModel, table=True):
    __tablename__ = "user_watchlist"
    user_id: int = Field(foreign_key="users.id", primary_key=True)
    product_id: int = Field(foreign_key="products.id", primary_key=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
