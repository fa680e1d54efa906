# app/api/__init__.py
from fastapi import FastAPI

from app.api.routers import products
from app.api.routers.health import router as health_router
from app.data.seed import seed
from app.repos.product_repo import ProductRepo


def create_app(repo: ProductRepo | None = None) -> FastAPI:
    """
    Najpierw katalog (seed), potem aplikacja.
    Wstrzykniety repo jest uzywany bez ponownego seedowania.
    """
    if repo is None:
        repo = seed()

    app = FastAPI(
        title="Product Service",
        version="1.0.0",
    )
    app.state.product_repo = repo

    app.include_router(health_router)
    app.include_router(products.router)

    return app
