"""Meta endpoints — health and version."""

from __future__ import annotations

from fastapi import APIRouter

from bazaar.interface import CHAIN_METHODS

router = APIRouter(prefix="/api/v1", tags=["meta"])


@router.get("/health")
def health():
    return {"status": "ok", "service": "bazaar"}


@router.get("/version")
def version():
    return {
        "service": "0.1.0",
        "query_methods": list(CHAIN_METHODS),
    }
