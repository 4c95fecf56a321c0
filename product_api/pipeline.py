"""
Request pipeline stages.

Each stage is a FastAPI dependency.  Routes list the stages they run, in
order, in the route table (see ``routes.py``); a stage either returns
normally or raises an ``ApiError`` that stops the request.
"""

import logging
import secrets
from datetime import datetime, timezone
from typing import Optional

from fastapi import Header, Request

from .core import validate_product
from .database import ProductStore
from .errors import ApiError

logger = logging.getLogger(__name__)


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


async def log_request(request: Request) -> None:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    logger.info("[%s] %s %s", datetime.now(timezone.utc).isoformat(), request.method, path)


async def require_api_key(request: Request, x_api_key: Optional[str] = Header(None)) -> None:
    expected = request.app.state.settings.api_key
    if not expected:
        return
    if not x_api_key or not secrets.compare_digest(x_api_key, expected):
        raise ApiError.unauthorized()


async def validate_product_body(request: Request) -> None:
    try:
        payload = await request.json()
    except ValueError:
        raise ApiError.validation("Request body must be a JSON object")
    validate_product(payload)


PUBLIC = (log_request,)
PROTECTED = (log_request, require_api_key)
MUTATING = (log_request, require_api_key, validate_product_body)
