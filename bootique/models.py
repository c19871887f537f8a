# bootique/models.py
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A product that can be bought."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    brand: str
    list_price: Decimal = Field(alias="listPrice", ge=0)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class OrderItem(BaseModel):
    """
    Product, quantity and price of one line in a basket.

    The price is a snapshot of the catalog price taken when the item was added;
    it is never recalculated afterwards.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_id: str = Field(alias="productId")
    quantity: int
    price: Decimal

    def total_price(self) -> Decimal:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class OrderItemIn(BaseModel):
    """
    What a client sends when adding to a basket: a product id and a quantity.

    There is no price field; anything the client sends as ``price`` is dropped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    product_id: str = Field(alias="productId")
    quantity: int

    def priced_at(self, price: Decimal) -> OrderItem:
        return OrderItem(product_id=self.product_id, quantity=self.quantity, price=price)

    def unpriced(self) -> OrderItem:
        # client-shape item, before the catalog price is known
        return self.priced_at(Decimal("0"))
