import copy
import logging
import threading
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional

from .errors import ApiError

# This file holds the in-memory product collection and the lock guarding it.

logger = logging.getLogger(__name__)

Product = Dict[str, Any]

SEED_PRODUCTS: List[Product] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]

# Fields a client may set; anything else in a payload is dropped.
PRODUCT_FIELDS = ("name", "description", "price", "category", "inStock")


def _new_id() -> str:
    return uuid.uuid4().hex


class ProductStore:
    """Ordered in-memory collection of products.

    Records never leave the store by reference: every read hands back a
    copy, and every mutation happens under ``_lock``.
    """

    def __init__(self, seed: bool = True, id_factory: Callable[[], str] = _new_id):
        self._items: List[Product] = []
        self._lock = threading.Lock()
        self._id_factory = id_factory
        if seed:
            self.reset(seed=True)

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, product_id: str) -> Optional[int]:
        for i, p in enumerate(self._items):
            if p["id"] == product_id:
                return i
        return None

    def get(self, product_id: str) -> Product:
        with self._lock:
            i = self._index_of(product_id)
            if i is None:
                raise ApiError.not_found()
            return dict(self._items[i])

    def list(self) -> List[Product]:
        with self._lock:
            return [dict(p) for p in self._items]

    def insert(self, candidate: Mapping[str, Any]) -> Product:
        with self._lock:
            pid = self._id_factory()
            while self._index_of(pid) is not None:
                pid = self._id_factory()
            product = {
                "id": pid,
                "name": candidate["name"],
                "description": candidate.get("description"),
                "price": candidate["price"],
                "category": candidate["category"],
                "inStock": True if candidate.get("inStock") is None else candidate["inStock"],
            }
            self._items.append(product)
            logger.debug("inserted product %s", pid)
            return dict(product)

    def replace(self, product_id: str, patch: Mapping[str, Any]) -> Product:
        with self._lock:
            i = self._index_of(product_id)
            if i is None:
                raise ApiError.not_found()
            updated = dict(self._items[i])
            for key in PRODUCT_FIELDS:
                if key not in patch:
                    continue
                # a null inStock means "not supplied", never "reset to default"
                if key == "inStock" and patch[key] is None:
                    continue
                updated[key] = patch[key]
            updated["id"] = product_id
            self._items[i] = updated
            logger.debug("replaced product %s", product_id)
            return dict(updated)

    def remove(self, product_id: str) -> None:
        with self._lock:
            i = self._index_of(product_id)
            if i is None:
                raise ApiError.not_found()
            del self._items[i]
            logger.debug("removed product %s", product_id)

    def reset(self, seed: bool = True) -> None:
        with self._lock:
            self._items = copy.deepcopy(SEED_PRODUCTS) if seed else []
