# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Request

from app.domain.schemas import Product
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(request: Request) -> ProductService:
    #katalog zasilany w create_app, trzymany w app.state
    return ProductService(request.app.state.product_repo)


@router.get("", response_model=List[Product])
def list_products(svc: ProductService = Depends(get_service)):
    return svc.list_products()


@router.get("/{product_id}", response_model=Product | None)
def get_product(product_id: int, svc: ProductService = Depends(get_service)):
    """
    Zwraca produkt albo null (200) gdy nie istnieje.
    """
    return svc.get_product(product_id)


@router.get("/{product_id}/price", response_model=float)
def get_product_price(product_id: int, svc: ProductService = Depends(get_service)):
    """
    Zwraca cene produktu albo 0.0 gdy nie istnieje.
    """
    return svc.get_product_price(product_id)
