#!/usr/bin/env python
import asyncio
import os
from sdk.catalog import CatalogClient

BASE_URL = "http://127.0.0.1:8085"
CREATES = 20

async def main():
    c = CatalogClient(base_url=BASE_URL, api_key=os.getenv("API_KEY") or None)
    c.reset()
    before = c.list_products()["totalItems"]

    print(f"Creating {CREATES} products concurrently...")
    created = await asyncio.gather(*[
        c.create_product_async(f"Item {i}", 10 + i, "bulk") for i in range(CREATES)
    ])

    ids = [p["id"] for p in created]
    after = c.list_products()["totalItems"]
    print(f"Unique ids: {len(set(ids))}/{len(ids)}")
    print(f"Catalog size: {before} -> {after}")
    print(c.product_stats())

if __name__ == "__main__":
    asyncio.run(main())
