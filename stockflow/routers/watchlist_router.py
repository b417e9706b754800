from typing import List
from fastapi import APIRouter, Depends

from ..application.services.watchlist_service import WatchlistService
from ..dependencies import get_current_user, get_watchlist_service
from ..schemas import ProductResponse, MessageResponse

router = APIRouter(prefix="/api/watchlist", tags=["Watchlist"])


@router.get("", response_model=List[ProductResponse])
def list_watchlist(current_user: int = Depends(get_current_user), watchlist: WatchlistService = Depends(get_watchlist_service)):
    return [ProductResponse(**vars(p)) for p in watchlist.list_watched(current_user)]


@router.post("/{product_id}", response_model=MessageResponse)
def watch_product(product_id: int, current_user: int = Depends(get_current_user), watchlist: WatchlistService = Depends(get_watchlist_service)):
    if watchlist.watch(current_user, product_id):
        return MessageResponse(message="Product added to watchlist")
    return MessageResponse(message="Product already on watchlist")


@router.delete("/{product_id}", response_model=MessageResponse)
def unwatch_product(product_id: int, current_user: int = Depends(get_current_user), watchlist: WatchlistService = Depends(get_watchlist_service)):
    watchlist.unwatch(current_user, product_id)
    return MessageResponse(message="Product removed from watchlist")
