# product_inventory/api/__init__.py
from fastapi import Request

from product_inventory.repos.product_repo import ProductRepo
from product_inventory.services.product_service import ProductService


def get_repo(request: Request) -> ProductRepo:
    return request.app.state.repo


def get_service(request: Request) -> ProductService:
    return ProductService(get_repo(request))
