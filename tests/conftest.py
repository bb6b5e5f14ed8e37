"""Pytest fixtures for the product inventory API."""

import pytest
from fastapi.testclient import TestClient

from product_inventory.main import create_app
from product_inventory.repos.product_repo import ProductRepo
from product_inventory.services.product_service import ProductService


@pytest.fixture
def products_file(tmp_path):
    return tmp_path / "products.json"


@pytest.fixture
def repo(products_file):
    return ProductRepo(products_file)


@pytest.fixture
def service(repo):
    repo.write_all([
        {"id": 1, "name": "Laptop", "price": 60000, "inStock": True},
        {"id": 2, "name": "Mouse", "price": 800, "inStock": True},
    ])
    return ProductService(repo)


@pytest.fixture
def client(products_file):
    """App bound to a temp products file, seeded on startup."""
    app = create_app(products_file)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
