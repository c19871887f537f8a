import threading
from typing import Dict, Iterable, Optional, Tuple

import structlog

from .basket import Basket
from .models import Product

# In-memory stores. Restarting the process wipes all baskets.

logger = structlog.get_logger(__name__)


class ProductStore:
    """Catalog of products, seeded once and read-only afterwards."""

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: Dict[str, Product] = {}
        for p in products:
            self._products[p.id] = p

    def list_products(self) -> Tuple[Product, ...]:
        return tuple(self._products.values())

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def __len__(self) -> int:
        return len(self._products)


class BasketStore:
    """
    Baskets keyed by session id.

    A basket is created on first access and then handed out for that key for
    the lifetime of the store. Creation happens under the lock, so concurrent
    first requests for the same key all get the one basket.
    """

    def __init__(self) -> None:
        self._baskets: Dict[str, Basket] = {}
        self._lock = threading.Lock()

    def get_basket_by_id(self, basket_id: str) -> Basket:
        basket = self._baskets.get(basket_id)
        if basket is not None:
            return basket

        with self._lock:
            basket = self._baskets.get(basket_id)
            if basket is None:
                basket = Basket()
                self._baskets[basket_id] = basket
                logger.info("basket_created", basket_id=basket_id)
            return basket

    def __contains__(self, basket_id: object) -> bool:
        return basket_id in self._baskets

    def __len__(self) -> int:
        return len(self._baskets)
