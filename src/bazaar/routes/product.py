"""Product endpoints — read operations over the catalogue."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from bazaar.controllers.product import ProductController
from bazaar.deps import get_categories, get_products
from bazaar.handler import dispatch
from bazaar.interface import QueryModel

router = APIRouter(prefix="/api/v1/product", tags=["product"])


def get_controller(
    products: QueryModel = Depends(get_products),
    categories: QueryModel = Depends(get_categories),
) -> ProductController:
    return ProductController(products, categories)


@router.get("/get-product")
async def list_products(request: Request, controller: ProductController = Depends(get_controller)):
    return await dispatch(controller.list_products, request)


@router.get("/get-product/{slug}")
async def single_product(request: Request, controller: ProductController = Depends(get_controller)):
    return await dispatch(controller.single_product, request)


@router.get("/product-photo/{pid}")
async def product_photo(request: Request, controller: ProductController = Depends(get_controller)):
    return await dispatch(controller.product_photo, request)


@router.get("/product-list/{page}")
async def product_list(request: Request, controller: ProductController = Depends(get_controller)):
    return await dispatch(controller.product_list, request)


@router.get("/search/{keyword}")
async def search_products(request: Request, controller: ProductController = Depends(get_controller)):
    return await dispatch(controller.search_products, request)


@router.get("/related-product/{pid}/{cid}")
async def related_products(
    request: Request, controller: ProductController = Depends(get_controller)
):
    return await dispatch(controller.related_products, request)


@router.get("/product-category/{slug}")
async def products_by_category(
    request: Request, controller: ProductController = Depends(get_controller)
):
    return await dispatch(controller.products_by_category, request)
