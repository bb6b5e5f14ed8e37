# product_inventory/data/seed.py
from product_inventory.repos.product_repo import ProductRepo
from product_inventory.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    {"id": 1, "name": "Laptop", "price": 60000, "inStock": True},
    {"id": 2, "name": "Mouse", "price": 800, "inStock": True},
]


def seed(repo: ProductRepo) -> None:
    if not repo.exists():
        logger.info(f"Tworzę pusty plik produktów {repo.path}")
        repo.write_all([])

    # not forcing: only seed if empty
    if repo.read_all():
        return

    logger.info(f"Dodaję {len(SAMPLE_PRODUCTS)} przykładowe produkty")
    repo.write_all([dict(p) for p in SAMPLE_PRODUCTS])
