# product_inventory/domain/errors.py
"""
Wyjątki domeny produktów.
Serwis je rzuca, routery tłumaczą je na odpowiedzi HTTP.
"""


class ProductError(Exception):
    """Bazowy wyjątek serwisu produktów."""

    message = "Something went wrong!"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class StorageError(ProductError):
    pass


class StorageReadError(StorageError):
    message = "Could not read products data"


class StorageWriteError(StorageError):
    message = "Could not update products data"


class ProductNotFound(ProductError):
    message = "Product not found"


class InvalidProduct(ProductError):
    message = "Name, price, and inStock are required"
