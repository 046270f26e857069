from __future__ import annotations

from fastapi import APIRouter

from . import health, quote

router = APIRouter()
router.include_router(health.router)
router.include_router(quote.router)

__all__ = ["router"]
