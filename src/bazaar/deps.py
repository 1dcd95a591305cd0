"""FastAPI dependencies for Bazaar routes."""

from __future__ import annotations

from fastapi import Request

from bazaar.interface import QueryModel


def get_categories(request: Request) -> QueryModel:
    """Get the category model from app state."""
    return request.app.state.categories


def get_products(request: Request) -> QueryModel:
    """Get the product model from app state."""
    return request.app.state.products
