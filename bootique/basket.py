# bootique/basket.py
import threading
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Tuple

from .models import OrderItem


def _sum_total(items: Iterable[OrderItem]) -> Decimal:
    return sum((item.total_price() for item in items), Decimal("0"))


class Basket:
    """
    Append-only list of order items for one session.

    Adding the same product twice gives two separate items; nothing is merged.
    Appends and reads may come from different request threads at the same time.
    """

    def __init__(self) -> None:
        self._items: List[OrderItem] = []
        self._lock = threading.Lock()

    def add_order_item(self, item: OrderItem) -> None:
        with self._lock:
            self._items.append(item)

    def order_items(self) -> Tuple[OrderItem, ...]:
        with self._lock:
            return tuple(self._items)

    def total_price(self) -> Decimal:
        return _sum_total(self.order_items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def to_dict(self) -> Dict[str, Any]:
        items = self.order_items()
        return {
            "orderItems": [item.to_dict() for item in items],
            "totalPrice": str(_sum_total(items)),
        }
