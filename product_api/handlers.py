from typing import Optional, Dict, Any
from fastapi import Body, Depends, Query, Request, Response
from fastapi.responses import PlainTextResponse

from .database import ProductStore
from .pipeline import get_store
from .query import paginate_products, search_products, category_stats

# Endpoint bodies.  Paths, status codes and pipeline stages live in routes.py.

WELCOME = "Welcome to the Product API! Go to /api/products to see all products."

async def welcome():
    return PlainTextResponse(WELCOME)

# ---------------------------
# Read endpoints
# ---------------------------
async def list_products(
    category: Optional[str] = None,
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Items per page, defaults to 10"),
    store: ProductStore = Depends(get_store),
):
    return paginate_products(store.list(), category=category, page=page, limit=limit)

async def search(q: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return search_products(store.list(), q)

async def stats(store: ProductStore = Depends(get_store)):
    return category_stats(store.list())

async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return store.get(product_id)

# ---------------------------
# Write endpoints (payload already checked by the pipeline)
# ---------------------------
async def create_product(payload: Dict[str, Any] = Body(...), store: ProductStore = Depends(get_store)):
    return store.insert(payload)

async def update_product(product_id: str, payload: Dict[str, Any] = Body(...), store: ProductStore = Depends(get_store)):
    return store.replace(product_id, payload)

async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    store.remove(product_id)
    return Response(status_code=204)

# ---------------------------
# Utility: reset (for tests/demo)
# ---------------------------
async def reset_store(request: Request, store: ProductStore = Depends(get_store)):
    store.reset(seed=request.app.state.settings.seed_products)
    return {"status": "reset", "totalItems": len(store)}
