import logging
from typing import List
from fastapi import APIRouter, Depends

from ..application.ports.product_repo import ProductInput
from ..application.services.product_service import ProductService
from ..dependencies import get_current_user, get_product_service
from ..schemas import ProductRequest, ProductResponse, ProductCreatedResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


def _to_input(body: ProductRequest) -> ProductInput:
    return ProductInput(
        name=body.name,
        sku=body.sku,
        description=body.description,
        sector_id=body.sector_id,
        price=body.price,
        stock_quantity=body.stock_quantity,
        min_stock=body.min_stock,
    )


@router.get("", response_model=List[ProductResponse])
def list_products(current_user: int = Depends(get_current_user), products: ProductService = Depends(get_product_service)):
    return [ProductResponse(**vars(p)) for p in products.list_products()]


@router.post("", response_model=ProductCreatedResponse)
def create_product(body: ProductRequest, current_user: int = Depends(get_current_user), products: ProductService = Depends(get_product_service)):
    product = products.create_product(current_user, _to_input(body))
    return ProductCreatedResponse(message="Product added successfully", id=product.id)


# Declared before /{product_id} so the literal path wins
@router.get("/low-stock", response_model=List[ProductResponse])
def list_low_stock(current_user: int = Depends(get_current_user), products: ProductService = Depends(get_product_service)):
    return [ProductResponse(**vars(p)) for p in products.list_low_stock_products()]


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, current_user: int = Depends(get_current_user), products: ProductService = Depends(get_product_service)):
    return ProductResponse(**vars(products.get_product(product_id)))


@router.put("/{product_id}", response_model=MessageResponse)
def update_product(product_id: int, body: ProductRequest, current_user: int = Depends(get_current_user), products: ProductService = Depends(get_product_service)):
    products.update_product(product_id, _to_input(body))
    return MessageResponse(message="Product updated successfully")


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: int, current_user: int = Depends(get_current_user), products: ProductService = Depends(get_product_service)):
    products.delete_product(product_id)
    return MessageResponse(message="Product deleted successfully")
