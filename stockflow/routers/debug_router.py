from typing import List
from fastapi import APIRouter, Depends

from ..application.services.product_service import ProductService
from ..core.config import get_settings
from ..dependencies import get_current_user, get_product_service
from ..exceptions import NotFound
from ..schemas import SkuDebugEntry

router = APIRouter(prefix="/api/debug", tags=["Debug"])


def require_debug():
    if not get_settings().DEBUG:
        raise NotFound("Not Found")


@router.get("/skus", response_model=List[SkuDebugEntry], dependencies=[Depends(require_debug)])
def list_skus(current_user: int = Depends(get_current_user), products: ProductService = Depends(get_product_service)):
    return products.list_skus()
