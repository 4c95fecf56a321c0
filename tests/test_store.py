# tests/test_store.py
import pytest

from product_api.database import ProductStore
from product_api.errors import ApiError, ErrorKind


def test_seeded_store_keeps_insertion_order():
    store = ProductStore()
    assert [p["id"] for p in store.list()] == ["1", "2", "3"]


def test_unseeded_store_is_empty():
    assert len(ProductStore(seed=False)) == 0


def test_list_returns_copies():
    store = ProductStore()
    snapshot = store.list()
    snapshot[0]["name"] = "changed"
    snapshot.pop()
    assert store.get("1")["name"] == "Laptop"
    assert len(store) == 3


def test_insert_appends_with_fresh_id():
    store = ProductStore(seed=False)
    a = store.insert({"name": "A", "price": 1, "category": "x"})
    b = store.insert({"name": "B", "price": 2, "category": "x", "inStock": False})
    assert a["id"] != b["id"]
    assert [p["name"] for p in store.list()] == ["A", "B"]
    assert a["inStock"] is True
    assert a["description"] is None
    assert b["inStock"] is False


def test_insert_skips_colliding_ids():
    ids = iter(["1", "1", "fresh"])
    store = ProductStore(id_factory=lambda: next(ids))
    product = store.insert({"name": "A", "price": 1, "category": "x"})
    assert product["id"] == "fresh"


def test_replace_merges_and_keeps_id():
    store = ProductStore()
    updated = store.replace("2", {"id": "other", "price": 700, "inStock": False})
    assert updated["id"] == "2"
    assert updated["price"] == 700
    assert updated["name"] == "Smartphone"
    assert updated["inStock"] is False
    assert store.get("2") == updated


def test_replace_unknown_raises_not_found():
    with pytest.raises(ApiError) as exc:
        ProductStore().replace("missing", {"name": "x"})
    assert exc.value.kind is ErrorKind.NOT_FOUND


def test_remove_decrements_by_one():
    store = ProductStore()
    store.remove("1")
    assert len(store) == 2
    with pytest.raises(ApiError):
        store.get("1")


def test_remove_unknown_leaves_store_untouched():
    store = ProductStore()
    with pytest.raises(ApiError):
        store.remove("missing")
    assert len(store) == 3


def test_reset_does_not_share_seed_records():
    store = ProductStore()
    store.replace("1", {"name": "Renamed"})
    store.reset()
    assert store.get("1")["name"] == "Laptop"


def test_replace_null_in_stock_is_ignored():
    store = ProductStore()
    updated = store.replace("3", {"inStock": None, "price": 45})
    assert updated["inStock"] is False
    assert updated["price"] == 45
