"""Product controllers — the read side of the catalogue.

Every handler validates its route parameters first, then queries, and
turns any data-access failure into the error envelope.
"""

from __future__ import annotations

import re

from bazaar.envelope import send_error
from bazaar.interface import QueryModel

PER_PAGE = 6
RELATED_LIMIT = 3


def _bad_request(res, message: str):
    return res.status(400).send({"success": False, "message": message})


def _not_found(res, message: str):
    return res.status(404).send({"success": False, "message": message})


def _parse_page(raw) -> int | None:
    if raw is None:
        return 1
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return None
    return page if page > 0 else None


class ProductController:
    """Request handlers over the product and category models."""

    def __init__(self, products: QueryModel, categories: QueryModel):
        self.products = products
        self.categories = categories

    async def list_products(self, req, res):
        try:
            products = await (
                self.products.find({})
                .populate("category")
                .select("-photo")
                .sort({"created_at": -1})
            )
        except Exception as exc:
            return send_error(res, "Error in getting products", exc)
        return res.status(200).send(
            {
                "success": True,
                "count_total": len(products),
                "message": "All Products",
                "products": products,
            }
        )

    async def single_product(self, req, res):
        slug = req.params.get("slug")
        if not slug:
            return _bad_request(res, "slug is required")
        try:
            product = await (
                self.products.find_one({"slug": slug}).select("-photo").populate("category")
            )
        except Exception as exc:
            return send_error(res, "Error while getting single product", exc)
        if product is None:
            return _not_found(res, "Product not found")
        return res.status(200).send(
            {"success": True, "message": "Single product fetched", "product": product}
        )

    async def product_photo(self, req, res):
        pid = req.params.get("pid")
        if not pid:
            return _bad_request(res, "Product ID is required")
        try:
            product = await self.products.find_by_id(pid).select("photo")
        except Exception as exc:
            return send_error(res, "Error while getting photo", exc)
        if product is None:
            return _not_found(res, "Product not found")
        photo = product.get("photo") or {}
        if not photo.get("data"):
            return _not_found(res, "Photo not found")
        res.set("Content-Type", photo.get("content_type", "application/octet-stream"))
        return res.status(200).send(photo["data"])

    async def product_list(self, req, res):
        page = _parse_page(req.params.get("page"))
        if page is None:
            return _bad_request(res, "Page number must be number greater than 0")
        try:
            products = await (
                self.products.find({})
                .select("-photo")
                .skip((page - 1) * PER_PAGE)
                .limit(PER_PAGE)
                .sort({"created_at": -1})
            )
        except Exception as exc:
            return send_error(res, "Error in per page control", exc)
        return res.status(200).send(
            {"success": True, "message": "Products list fetched", "products": products}
        )

    async def search_products(self, req, res):
        keyword = (req.params.get("keyword") or "").strip()
        if not keyword:
            return _bad_request(res, "Keyword is required")
        pattern = {"$regex": re.escape(keyword), "$options": "i"}
        try:
            results = await self.products.find(
                {"$or": [{"name": pattern}, {"description": pattern}]}
            ).select("-photo")
        except Exception as exc:
            return send_error(res, "Error in product search", exc)
        return res.status(200).json(results)

    async def related_products(self, req, res):
        pid, cid = req.params.get("pid"), req.params.get("cid")
        if not pid or not cid:
            return _bad_request(res, "Product ID and Category ID are required")
        try:
            products = await (
                self.products.find({"category": cid, "_id": {"$ne": pid}})
                .select("-photo")
                .limit(RELATED_LIMIT)
                .populate("category")
            )
        except Exception as exc:
            return send_error(res, "Error while getting related products", exc)
        return res.status(200).send(
            {"success": True, "message": "Related products fetched", "products": products}
        )

    async def products_by_category(self, req, res):
        slug = req.params.get("slug")
        if not slug:
            return _bad_request(res, "slug is required")
        try:
            category = await self.categories.find_one({"slug": slug})
            if category is None:
                return _not_found(res, "Category not found")
            products = await (
                self.products.find({"category": category["_id"]})
                .select("-photo")
                .populate("category")
            )
        except Exception as exc:
            return send_error(res, "Error while getting category products", exc)
        return res.status(200).send(
            {
                "success": True,
                "message": "Category and products fetched",
                "category": category,
                "products": products,
            }
        )
