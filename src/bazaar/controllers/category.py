"""Category controllers — list and look up catalogue categories."""

from __future__ import annotations

from bazaar.envelope import send_error
from bazaar.interface import QueryModel


class CategoryController:
    """Request handlers over the category model."""

    def __init__(self, categories: QueryModel):
        self.categories = categories

    async def list_categories(self, req, res):
        try:
            category = await self.categories.find({})
        except Exception as exc:
            return send_error(res, "Error while getting all categories", exc)
        if not category:
            return res.status(200).send(
                {"success": True, "message": "No Categories Found", "category": []}
            )
        return res.status(200).send(
            {"success": True, "message": "All Categories List", "category": category}
        )

    async def single_category(self, req, res):
        try:
            category = await self.categories.find_one({"slug": req.params.get("slug")})
        except Exception as exc:
            return send_error(res, "Error while getting single category", exc)
        if category is None:
            return res.status(404).send({"success": False, "message": "Category not found"})
        return res.status(200).send(
            {
                "success": True,
                "message": "Get Single Category Successfully",
                "category": category,
            }
        )
