# app/data/seed.py
from app.domain.schemas import Product
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = (
    Product(id=1, name="Laptop", description="High performance laptop", price=999.99),
    Product(id=2, name="Phone", description="Smartphone with great camera", price=699.99),
)


def seed(repo: ProductRepo | None = None) -> ProductRepo:
    repo = repo if repo is not None else ProductRepo()
    repo.seed(SAMPLE_PRODUCTS)
    logger.info(f"Seeded catalog with {len(SAMPLE_PRODUCTS)} products")
    return repo
