# tests/test_concurrency.py
import asyncio
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import httpx
from fastapi.testclient import TestClient

from bootique.main import create_app


async def _add_task(ac, basket_id, product_id, quantity):
    return await ac.post(f"/baskets/{basket_id}/items", json={"productId": product_id, "quantity": quantity})


async def _race(app, basket_id, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*[_add_task(ac, basket_id, "4", i + 1) for i in range(n)])


def test_concurrent_adds_to_new_basket():
    app = create_app()
    n = 50
    results = asyncio.run(_race(app, "race", n))
    assert [r.status_code for r in results] == [200] * n

    body = TestClient(app).get("/baskets/race").json()
    assert len(body["orderItems"]) == n
    assert sorted(i["quantity"] for i in body["orderItems"]) == list(range(1, n + 1))
    assert Decimal(body["totalPrice"]) == Decimal("6.95") * sum(range(1, n + 1))


def test_threaded_clients_same_basket():
    app = create_app()
    client = TestClient(app)
    n = 40

    def add(i):
        return client.post("/baskets/threads/items", json={"productId": "3", "quantity": 1}).status_code

    with ThreadPoolExecutor(max_workers=8) as pool:
        statuses = list(pool.map(add, range(n)))

    assert statuses == [200] * n
    assert len(app.state.baskets) == 1
    assert len(app.state.baskets.get_basket_by_id("threads")) == n
