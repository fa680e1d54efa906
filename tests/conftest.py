"""Pytest fixtures for the product service tests."""

import pytest
from fastapi.testclient import TestClient

from app.api import create_app
from app.data.seed import seed
from app.repos.product_repo import ProductRepo
from app.services.product_service import ProductService


@pytest.fixture
def repo():
    """Freshly seeded catalog, independent per test."""
    return seed(ProductRepo())


@pytest.fixture
def service(repo):
    return ProductService(repo)


@pytest.fixture
def client():
    return TestClient(create_app())
