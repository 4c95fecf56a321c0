"""
The route table.

``ROUTES`` is matched top to bottom, so a literal path such as
``/api/products/search`` has to come before ``/api/products/{product_id}``
or the parameterized route would swallow it as an id lookup.
``check_route_order`` enforces that, and ``build_router`` refuses to
register a table that breaks it.
"""

from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from fastapi import APIRouter, Depends
from starlette.routing import compile_path

from . import handlers
from .models import ErrorResponse, PagedResult, Product, ResetResult
from .pipeline import MUTATING, PROTECTED, PUBLIC


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable[..., Any]
    pipeline: Tuple[Callable[..., Any], ...]
    status_code: int = 200
    response_model: Optional[Any] = None


ROUTES: List[Route] = [
    Route("GET", "/", handlers.welcome, PUBLIC),
    Route("GET", "/api/products", handlers.list_products, PROTECTED, response_model=PagedResult),
    Route("GET", "/api/products/search", handlers.search, PROTECTED, response_model=List[Product]),
    Route("GET", "/api/products/stats", handlers.stats, PROTECTED, response_model=Dict[str, int]),
    Route("GET", "/api/products/{product_id}", handlers.get_product, PROTECTED, response_model=Product),
    Route("POST", "/api/products", handlers.create_product, MUTATING, 201, Product),
    Route("PUT", "/api/products/{product_id}", handlers.update_product, MUTATING, response_model=Product),
    Route("DELETE", "/api/products/{product_id}", handlers.delete_product, PROTECTED, 204),
    Route("POST", "/reset", handlers.reset_store, PROTECTED, response_model=ResetResult),
]

ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def check_route_order(routes: Sequence[Route]) -> None:
    """Raise ``ValueError`` if an earlier route would capture a later one."""
    for i, earlier in enumerate(routes):
        if "{" not in earlier.path:
            continue
        regex, _, _ = compile_path(earlier.path)
        for later in routes[i + 1:]:
            if later.method == earlier.method and regex.match(later.path):
                raise ValueError(
                    f"{earlier.method} {earlier.path} shadows {later.method} {later.path}; "
                    "register the literal route first"
                )


def build_router(routes: Sequence[Route] = ROUTES) -> APIRouter:
    check_route_order(routes)
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            dependencies=[Depends(stage) for stage in route.pipeline],
            status_code=route.status_code,
            response_model=route.response_model,
            responses=ERROR_RESPONSES if route.path != "/" else None,
        )
    return router
