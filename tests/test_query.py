# tests/test_query.py
import pytest

from product_api.database import ProductStore
from product_api.errors import ApiError
from product_api.query import category_stats, coerce_positive_int, paginate_products, search_products


def snapshot():
    return ProductStore().list()


@pytest.mark.parametrize("raw,expected", [
    (None, 7), ("3", 3), (" 3", 3), ("3abc", 3), ("2.9", 2),
    ("abc", 7), ("", 7), ("0", 7), ("-2", 7),
])
def test_coerce_positive_int(raw, expected):
    assert coerce_positive_int(raw, 7) == expected


def test_category_filter_is_case_sensitive():
    assert paginate_products(snapshot(), category="Electronics")["totalItems"] == 0
    assert paginate_products(snapshot(), category="electronics")["totalItems"] == 2


def test_page_two_of_three():
    items = snapshot()
    result = paginate_products(items, page="2", limit="2")
    assert result == {"page": 2, "limit": 2, "totalItems": 3, "data": [items[2]]}


def test_page_past_the_end_is_empty():
    result = paginate_products(snapshot(), page="5")
    assert result["data"] == []
    assert result["totalItems"] == 3


def test_search_ignores_missing_description():
    items = snapshot() + [{"id": "x", "name": "Fan", "description": None, "price": 1, "category": "home", "inStock": True}]
    assert [p["id"] for p in search_products(items, "fan")] == ["x"]
    assert [p["id"] for p in search_products(items, "STORAGE")] == ["2"]


def test_search_requires_query():
    with pytest.raises(ApiError):
        search_products(snapshot(), None)


def test_stats_counts_per_category():
    assert category_stats(snapshot()) == {"electronics": 2, "kitchen": 1}
    assert category_stats([]) == {}
