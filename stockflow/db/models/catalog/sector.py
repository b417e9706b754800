# stockflow/db/models/catalog/sector.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime

class Sector(SQLModel, table=True):
    __tablename__ = "sectors"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True)
    description: Optional[str] = Field(default=None)
    icon: str = Field(default="📦", max_length=16)
    created_at: datetime = Field(default_factory=datetime.utcnow)
