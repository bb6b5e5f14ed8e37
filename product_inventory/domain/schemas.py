# product_inventory/domain/schemas.py
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from product_inventory.domain.coercion import to_bool, to_number
from product_inventory.domain.errors import InvalidProduct


class ProductCreate(BaseModel):
    """Schema dla tworzenia produktu (name, price, inStock wymagane)."""

    name: Any = None
    price: Any = None
    in_stock: Any = Field(default=None, alias="inStock")

    def to_fields(self) -> dict:
        #null też liczy się jako podane pole, sprawdzamy model_fields_set a nie wartość
        provided = self.model_fields_set
        if not to_bool(self.name) or "price" not in provided or "in_stock" not in provided:
            raise InvalidProduct()

        return {
            "name": self.name,
            "price": to_number(self.price),
            "inStock": to_bool(self.in_stock),
        }


class ProductUpdate(BaseModel):
    """Schema dla aktualizacji produktu, każde pole opcjonalne."""

    name: Any = None
    price: Any = None
    in_stock: Any = Field(default=None, alias="inStock")

    def changes(self) -> dict:
        provided = self.model_fields_set
        changes = {}
        if "name" in provided:
            changes["name"] = self.name
        if "price" in provided:
            changes["price"] = to_number(self.price)
        if "in_stock" in provided:
            changes["inStock"] = to_bool(self.in_stock)
        return changes


class ProductOut(BaseModel):
    """Schema dla nowo utworzonego produktu (response)."""

    id: int
    name: Any
    price: int | float
    in_stock: bool = Field(alias="inStock")

    model_config = ConfigDict(extra="allow")


class MessageOut(BaseModel):
    message: str
