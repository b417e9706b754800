# stockflow/schemas/common/common.py
from pydantic import BaseModel

class MessageResponse(BaseModel):
    message: str

class StatsResponse(BaseModel):
    totalProducts: int
    lowStockItems: int
    totalValue: float
    unreadNotifications: int
