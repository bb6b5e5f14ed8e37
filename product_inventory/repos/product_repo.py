# product_inventory/repos/product_repo.py
import json
import threading
from pathlib import Path
from typing import Callable

from product_inventory.domain.errors import StorageReadError, StorageWriteError
from product_inventory.utils.logging import get_logger

logger = get_logger(__name__)


class ProductRepo:
    """
    -odczyt całej kolekcji z pliku json
    -zapis całej kolekcji (nadpisanie pliku, indent 2)
    -mutate: read-modify-write pod lockiem procesu
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        #tylko w obrębie jednego procesu, inne procesy na tym samym pliku dalej mogą nadpisać zmiany
        self._lock = threading.Lock()

    def exists(self) -> bool:
        return self.path.exists()

    def read_all(self) -> list[dict]:
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading products file {self.path}: {e}", exc_info=True)
            raise StorageReadError() from e

        if not isinstance(data, list):
            logger.error(f"Products file {self.path} does not contain a JSON array")
            raise StorageReadError()
        return data

    def write_all(self, products: list[dict]) -> None:
        try:
            payload = json.dumps(products, indent=2, ensure_ascii=False)
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing to products file {self.path}: {e}", exc_info=True)
            raise StorageWriteError() from e

    def mutate(self, fn: Callable[[list[dict]], list[dict] | None]) -> list[dict]:
        """
        Czyta kolekcję, przekazuje ją do fn i zapisuje wynik.
        fn może zmienić listę w miejscu (zwraca None) albo zwrócić nową listę.
        Jeśli fn rzuci wyjątek, nic nie jest zapisywane.
        """
        with self._lock:
            products = self.read_all()
            result = fn(products)
            if result is not None:
                products = result
            self.write_all(products)
            return products
