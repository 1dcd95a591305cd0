"""Seed catalogue loaded into the in-memory backend at startup."""

from __future__ import annotations

from bazaar.memory import MemoryModel

CATEGORIES = [
    {"_id": "66db427fdb0119d9234b27ed", "name": "Electronics", "slug": "electronics"},
    {"_id": "66db427fdb0119d9234b27ef", "name": "Book", "slug": "book"},
    {"_id": "66db427fdb0119d9234b27ee", "name": "Clothing", "slug": "clothing"},
]

PRODUCTS = [
    {
        "_id": "66db427fdb0119d9234b27f1",
        "name": "Laptop",
        "slug": "laptop",
        "description": "A powerful laptop for work and play",
        "price": 1499.99,
        "category": "66db427fdb0119d9234b27ed",
        "quantity": 30,
        "shipping": True,
    },
    {
        "_id": "66db427fdb0119d9234b27f3",
        "name": "Smartphone",
        "slug": "smartphone",
        "description": "A high-end smartphone",
        "price": 999.99,
        "category": "66db427fdb0119d9234b27ed",
        "quantity": 50,
        "shipping": False,
    },
    {
        "_id": "66db427fdb0119d9234b27f5",
        "name": "Textbook",
        "slug": "textbook",
        "description": "A comprehensive textbook",
        "price": 79.99,
        "category": "66db427fdb0119d9234b27ef",
        "quantity": 50,
        "shipping": True,
    },
    {
        "_id": "66db427fdb0119d9234b27f7",
        "name": "Novel",
        "slug": "novel",
        "description": "A bestselling novel",
        "price": 14.99,
        "category": "66db427fdb0119d9234b27ef",
        "quantity": 200,
        "shipping": True,
    },
    {
        "_id": "66db427fdb0119d9234b27f9",
        "name": "NUS T-shirt",
        "slug": "nus-tshirt",
        "description": "Plain NUS T-shirt for sale",
        "price": 4.99,
        "category": "66db427fdb0119d9234b27ee",
        "quantity": 200,
        "shipping": True,
        "photo": {"data": b"\x89PNG\r\n\x1a\n", "content_type": "image/png"},
    },
]


def build_catalogue(seed: bool = True) -> tuple[MemoryModel, MemoryModel]:
    """Return (categories, products), optionally filled with the seed data."""
    categories = MemoryModel("categories", CATEGORIES if seed else ())
    products = MemoryModel(
        "products",
        PRODUCTS if seed else (),
        relations={"category": categories},
    )
    return categories, products
