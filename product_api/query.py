"""
Read-side queries over a product snapshot.

All functions take a list of products already copied out of the store and
never modify it.  Filtering happens before pagination, so ``totalItems``
always reports the filtered count.
"""

import re
from collections import Counter
from typing import Any, Dict, List, Optional

from .errors import ApiError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_positive_int(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of ``raw``; fall back to ``default`` when
    there is none or it is not positive."""
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


def paginate_products(
    snapshot: List[Dict[str, Any]],
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    result = snapshot
    if category:
        result = [p for p in result if p["category"] == category]

    page_no = coerce_positive_int(page, DEFAULT_PAGE)
    per_page = coerce_positive_int(limit, DEFAULT_LIMIT)
    start = (page_no - 1) * per_page

    return {
        "page": page_no,
        "limit": per_page,
        "totalItems": len(result),
        "data": result[start:start + per_page],
    }


def search_products(snapshot: List[Dict[str, Any]], q: Optional[str]) -> List[Dict[str, Any]]:
    if not q:
        raise ApiError.validation("Missing search query")
    term = q.lower()
    return [
        p for p in snapshot
        if term in p["name"].lower() or term in (p.get("description") or "").lower()
    ]


def category_stats(snapshot: List[Dict[str, Any]]) -> Dict[str, int]:
    return dict(Counter(p["category"] for p in snapshot))
