# tests/test_sdk.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.main import create_app
from sdk.catalog import CatalogClient, CatalogError


def make_sdk(api_key=None):
    app = create_app(Settings(api_key=api_key or ""))
    return CatalogClient(base_url="http://testserver", api_key=api_key, session=TestClient(app)), app


def test_crud_round_trip():
    c, _ = make_sdk()
    created = c.create_product("Desk", 150, "office", description="Oak desk", in_stock=False)
    assert created["inStock"] is False
    assert c.get_product(created["id"])["name"] == "Desk"

    updated = c.update_product(created["id"], name="Desk", price=120, category="office")
    assert updated["price"] == 120
    assert updated["description"] == "Oak desk"

    c.delete_product(created["id"])
    with pytest.raises(CatalogError) as exc:
        c.get_product(created["id"])
    assert exc.value.status_code == 404
    assert exc.value.type == "NotFoundError"


def test_queries():
    c, _ = make_sdk()
    page = c.list_products(category="electronics", page=2, limit=1)
    assert page["totalItems"] == 2
    assert [p["name"] for p in page["data"]] == ["Smartphone"]
    assert [p["id"] for p in c.search_products("coffee")] == ["3"]
    assert c.product_stats() == {"electronics": 2, "kitchen": 1}


def test_validation_error_surfaces_message():
    c, _ = make_sdk()
    with pytest.raises(CatalogError) as exc:
        c.create_product("Broken", -5, "misc")
    assert exc.value.status_code == 400
    assert exc.value.message == "Invalid price"


def test_api_key_header_is_sent():
    c, _ = make_sdk(api_key="k")
    assert c.list_products()["totalItems"] == 3
    c.delete_product("1")
    assert c.reset() == {"status": "reset", "totalItems": 3}


def test_create_async():
    c, app = make_sdk()

    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport) as ac:
            return await c.create_product_async("Chair", 80, "office", client=ac)

    created = asyncio.run(run())
    assert c.get_product(created["id"])["category"] == "office"
