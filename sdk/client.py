# sdk/client.py
from typing import Any, Dict, List, Optional

import httpx
import requests
from rich import print


class StoreClient:
    def __init__(self, base_url: str = "http://localhost:8085", timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    # Products
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str) -> Optional[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        # unknown id is a normal answer, not an error
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    # Baskets
    def view_basket(self, basket_id: str) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}/baskets/{basket_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def add_to_basket(self, basket_id: str, product_id: str, quantity: int = 1) -> Dict[str, Any]:
        r = self.session.post(
            f"{self.base_url}/baskets/{basket_id}/items",
            json={"productId": product_id, "quantity": quantity},
            timeout=self.timeout,
        )
        r.raise_for_status()
        return r.json()

    # Async add (used by the concurrent demo)
    async def add_to_basket_async(self, basket_id: str, product_id: str, quantity: int = 1,
                                  client: Optional[httpx.AsyncClient] = None) -> httpx.Response:
        payload = {"productId": product_id, "quantity": quantity}
        url = f"{self.base_url}/baskets/{basket_id}/items"
        if client is not None:
            return await client.post(url, json=payload)
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            return await ac.post(url, json=payload)

    def health(self) -> bool:
        try:
            r = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        except requests.exceptions.ConnectionError:
            return False
        return r.status_code == 200


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Bootique client")
    parser.add_argument("--base-url", default="http://127.0.0.1:8085", help="API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    vb = subparsers.add_parser("view-basket", help="View basket contents")
    vb.add_argument("--basket", required=True, help="Basket (session) ID")

    add = subparsers.add_parser("add-to-basket", help="Add product to basket")
    add.add_argument("--basket", required=True, help="Basket (session) ID")
    add.add_argument("--product-id", required=True, help="Product ID")
    add.add_argument("--qty", type=int, default=1, help="Quantity to add")

    args = parser.parse_args()
    c = StoreClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products())
    elif args.command == "get-product":
        print(c.get_product(args.product_id) or f"[red]No product with id {args.product_id}[/red]")
    elif args.command == "view-basket":
        print(c.view_basket(args.basket))
    elif args.command == "add-to-basket":
        print(c.add_to_basket(args.basket, args.product_id, args.qty))
