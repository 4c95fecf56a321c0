# tests/test_concurrency.py
import asyncio
import httpx

from product_api.config import Settings
from product_api.database import ProductStore
from product_api.main import create_app


async def _create(ac, i):
    return await ac.post("/api/products", json={"name": f"Item {i}", "price": 1 + i, "category": "bulk"})


async def _create_many(app, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*[_create(ac, i) for i in range(n)])


def test_concurrent_creates_get_unique_ids():
    store = ProductStore(seed=True)
    app = create_app(Settings(), store)

    results = asyncio.run(_create_many(app, 25))

    assert all(r.status_code == 201 for r in results)
    ids = [r.json()["id"] for r in results]
    assert len(set(ids)) == 25
    assert len(store) == 28
    assert sum(1 for p in store.list() if p["category"] == "bulk") == 25
