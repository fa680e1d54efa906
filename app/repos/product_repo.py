# app/repos/product_repo.py
from typing import Dict, Iterable, List

from app.domain.schemas import Product


class ProductRepo:
    """
    Katalog produktow w pamieci (id -> Product).
    Wypelniany raz przy starcie, potem tylko odczyt.
    """

    def __init__(self):
        self._products: Dict[int, Product] = {}

    def seed(self, products: Iterable[Product]) -> None:
        #ten sam klucz nadpisuje poprzedni wpis
        for product in products:
            self._products[product.id] = product

    def get_all(self) -> List[Product]:
        #nowa lista przy kazdym wywolaniu, bez aliasu na wewnetrzny dict
        return list(self._products.values())

    def get_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)
