"""Bazaar — FastAPI storefront catalogue application.

Routes hand each request to a controller written against the QueryModel
contract. Models are injected through app state, so tests and the
in-memory backend plug in the same way.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from bazaar.config import BazaarConfig, load_config
from bazaar.interface import QueryModel
from bazaar.routes import category, meta, product
from bazaar.seed import build_catalogue

logger = logging.getLogger("bazaar")
audit_logger = logging.getLogger("bazaar.audit")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the in-memory catalogue unless models were injected."""
    config: BazaarConfig = app.state.config
    if app.state.categories is None or app.state.products is None:
        categories, products = build_catalogue(seed=config.seed)
        if app.state.categories is None:
            app.state.categories = categories
        if app.state.products is None:
            app.state.products = products
        logger.info(
            "In-memory catalogue ready (%d categories, %d products)",
            categories.count(),
            products.count(),
        )
    logger.info("Bazaar ready")
    yield
    logger.info("Bazaar shut down")


def create_app(
    config: BazaarConfig | None = None,
    *,
    categories: QueryModel | None = None,
    products: QueryModel | None = None,
) -> FastAPI:
    """Application factory."""
    if config is None:
        config = load_config()

    app = FastAPI(
        title="Bazaar",
        description="Storefront catalogue — categories and products",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.categories = categories
    app.state.products = products

    # ── Audit middleware ──────────────────────────────────────

    @app.middleware("http")
    async def audit_log(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start
        audit_logger.info(
            "%s %s %d %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response

    # ── Routers ───────────────────────────────────────────────

    app.include_router(meta.router)
    app.include_router(category.router)
    app.include_router(product.router)

    return app
