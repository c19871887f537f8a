# bootique/core.py
from typing import Tuple

import structlog

from .basket import Basket
from .database import BasketStore, ProductStore
from .errors import ProductNotFound
from .models import OrderItemIn, Product

# Request-level operations shared by the HTTP routes, the demos and the tests.

logger = structlog.get_logger(__name__)


def list_products(products: ProductStore) -> Tuple[Product, ...]:
    return products.list_products()


def get_product(products: ProductStore, product_id: str) -> Product:
    p = products.get_product_by_id(product_id)
    if p is None:
        logger.info("product_not_found", product_id=product_id)
        raise ProductNotFound(product_id)
    return p


def view_basket(baskets: BasketStore, basket_id: str) -> Basket:
    return baskets.get_basket_by_id(basket_id)


def add_to_basket(products: ProductStore, baskets: BasketStore, basket_id: str, item: OrderItemIn) -> Basket:
    """
    Add ``item`` to the basket of ``basket_id`` at the current catalog price.

    The product is resolved first; for an unknown product nothing is created,
    not even the basket, and ProductNotFound is raised.
    """
    product = get_product(products, item.product_id)
    basket = baskets.get_basket_by_id(basket_id)
    order_item = item.priced_at(product.list_price)
    basket.add_order_item(order_item)
    logger.info(
        "order_item_added",
        basket_id=basket_id,
        product_id=order_item.product_id,
        quantity=order_item.quantity,
        price=str(order_item.price),
    )
    return basket
