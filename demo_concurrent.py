import asyncio
import uuid
from decimal import Decimal

import httpx

from sdk.client import StoreClient

CLIENTS = 20


async def main():
    c = StoreClient(base_url="http://127.0.0.1:8085")
    basket_id = f"race-{uuid.uuid4().hex[:8]}"
    price = Decimal(c.get_product("4")["listPrice"])

    # Every request hits a basket that does not exist yet.
    print(f"\n⚡ Sending {CLIENTS} concurrent adds to new basket {basket_id}...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        responses = await asyncio.gather(*[
            c.add_to_basket_async(basket_id, "4", i + 1, client=ac) for i in range(CLIENTS)
        ])

    failed = [r for r in responses if r.status_code != 200]
    if failed:
        print(f"❌ {len(failed)} requests failed: {[r.status_code for r in failed]}")

    basket = c.view_basket(basket_id)
    expected_total = price * sum(range(1, CLIENTS + 1))
    print(f"🛒 Items in basket: {len(basket['orderItems'])} (expected {CLIENTS})")
    print(f"💰 Total: {basket['totalPrice']} (expected {expected_total})")
    if len(basket["orderItems"]) == CLIENTS and Decimal(basket["totalPrice"]) == expected_total:
        print("✅ No items lost")
    else:
        print("❌ Items were lost")


if __name__ == "__main__":
    asyncio.run(main())
