"""
Entrypoint for the product catalog API.

``create_app`` wires settings, logging, the product store, the route
table and the error handlers into a FastAPI application.  A ready-made
instance is created at import time as ``app``, so the service can be run
with::

    uvicorn product_api.main:app --port 8085

or directly with ``python -m product_api.main``, which reads HOST and PORT
from the environment.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .database import ProductStore
from .errors import install_error_handlers
from .logging_config import setup_logging
from .routes import build_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    """Build an application around its own store.

    Tests pass their own ``settings`` and ``store`` so that every app is
    isolated; the module-level ``app`` uses the environment defaults.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore(seed=settings.seed_products)

    # must come before CORSMiddleware so CORS wraps the error middleware
    install_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(build_router())

    if settings.api_key:
        logger.info("API key authentication enabled for /api/products")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
