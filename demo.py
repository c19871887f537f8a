#!/usr/bin/env python
import uuid

from sdk.client import StoreClient


def main():
    c = StoreClient(base_url="http://127.0.0.1:8085")
    basket_id = f"demo-{uuid.uuid4().hex[:8]}"

    # -----------------------------
    # Catalog
    # -----------------------------
    print("Listing products...")
    products = c.list_products()
    for p in products:
        print(p)

    print("\nLooking up product 1...")
    print(c.get_product("1"))
    print("Looking up unknown product 999...")
    print(c.get_product("999"))

    # -----------------------------
    # Basket
    # -----------------------------
    print(f"\nAdding items to basket {basket_id}...")
    print(c.add_to_basket(basket_id, "1", 2))
    print(c.add_to_basket(basket_id, "3", 1))
    # same product again: shows up as a second line, not merged
    print(c.add_to_basket(basket_id, "3", 3))

    print("\nViewing basket...")
    basket = c.view_basket(basket_id)
    for item in basket["orderItems"]:
        print(item)
    print("Total:", basket["totalPrice"])


if __name__ == "__main__":
    main()
