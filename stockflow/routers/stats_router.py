from fastapi import APIRouter, Depends

from ..application.services.stats_service import StatsService
from ..dependencies import get_current_user, get_stats_service
from ..schemas import StatsResponse

router = APIRouter(prefix="/api/stats", tags=["Dashboard"])


@router.get("", response_model=StatsResponse)
def get_stats(current_user: int = Depends(get_current_user), stats: StatsService = Depends(get_stats_service)):
    s = stats.get_stats(current_user)
    return StatsResponse(
        totalProducts=s.total_products,
        lowStockItems=s.low_stock_items,
        totalValue=s.total_value,
        unreadNotifications=s.unread_notifications,
    )
