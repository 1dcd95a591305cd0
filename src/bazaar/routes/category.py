"""Category endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from bazaar.controllers.category import CategoryController
from bazaar.deps import get_categories
from bazaar.handler import dispatch
from bazaar.interface import QueryModel

router = APIRouter(prefix="/api/v1/category", tags=["category"])


@router.get("/get-category")
async def list_categories(
    request: Request,
    categories: QueryModel = Depends(get_categories),
):
    return await dispatch(CategoryController(categories).list_categories, request)


@router.get("/single-category/{slug}")
async def single_category(
    request: Request,
    categories: QueryModel = Depends(get_categories),
):
    return await dispatch(CategoryController(categories).single_category, request)
