# product_inventory/services/product_service.py
from typing import Any, Dict, List

from product_inventory.domain.coercion import parse_id
from product_inventory.domain.errors import ProductNotFound
from product_inventory.domain.schemas import ProductCreate, ProductUpdate
from product_inventory.repos.product_repo import ProductRepo
from product_inventory.utils.logging import get_logger

logger = get_logger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _has_id(product: Any, product_id: int | None) -> bool:
    #porównanie jak ===, True nie jest równe 1, elementy nie będące obiektem nie mają id
    if product_id is None or not isinstance(product, dict):
        return False
    pid = product.get("id")
    return _is_int(pid) and pid == product_id


def next_id(products: List[dict]) -> int:
    ids = [p["id"] for p in products if isinstance(p, dict) and _is_int(p.get("id"))]
    return max(ids) + 1 if ids else 1


class ProductService:
    """
    Use case dla domeny product
    query (list, list_in_stock, get) tylko odczyt pliku
    commands (create, update, delete) czytają i nadpisują całą kolekcję
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    #query
    def list_products(self) -> List[Dict[str, Any]]:
        return self.repo.read_all()

    def list_in_stock(self) -> List[Dict[str, Any]]:
        return [
            p for p in self.repo.read_all()
            if isinstance(p, dict) and p.get("inStock") is True
        ]

    def get_product(self, raw_id: str) -> Dict[str, Any]:
        product_id = parse_id(raw_id)
        for product in self.repo.read_all():
            if _has_id(product, product_id):
                return product
        raise ProductNotFound()

    #commands
    def create_product(self, payload: ProductCreate) -> Dict[str, Any]:
        fields = payload.to_fields()
        created = {}

        def add(products: List[dict]) -> None:
            created.update({"id": next_id(products), **fields})
            products.append(created)

        self.repo.mutate(add)
        logger.info(f"Utworzono produkt {created['id']} ({created['name']})")
        return created

    def update_product(self, raw_id: str, payload: ProductUpdate) -> Dict[str, Any]:
        product_id = parse_id(raw_id)
        changes = payload.changes()
        updated = {}

        def merge(products: List[dict]) -> None:
            for index, product in enumerate(products):
                if _has_id(product, product_id):
                    updated.update({**product, **changes})
                    products[index] = updated
                    return
            raise ProductNotFound()

        self.repo.mutate(merge)
        logger.info(f"Zaktualizowano produkt {product_id}, pola: {sorted(changes)}")
        return updated

    def delete_product(self, raw_id: str) -> None:
        product_id = parse_id(raw_id)

        def remove(products: List[dict]) -> List[dict]:
            filtered = [p for p in products if not _has_id(p, product_id)]
            if len(filtered) == len(products):
                raise ProductNotFound()
            return filtered

        self.repo.mutate(remove)
        logger.info(f"Usunięto produkt {product_id}")
