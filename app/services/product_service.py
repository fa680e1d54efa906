# app/services/product_service.py
from typing import List

from app.domain.schemas import Product
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

# brak produktu i produkt za darmo daja ten sam wynik
MISSING_PRICE = 0.0


class ProductService:
    """
    Use case'y odczytu katalogu. Brak komend, katalog jest tylko do odczytu.
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    def list_products(self) -> List[Product]:
        return self.repo.get_all()

    def get_product(self, product_id: int) -> Product | None:
        product = self.repo.get_by_id(product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
        return product

    def get_product_price(self, product_id: int) -> float:
        product = self.get_product(product_id)
        if product is None:
            return MISSING_PRICE
        return product.price
