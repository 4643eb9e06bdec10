"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .sales import router as sales_router

api_router = APIRouter()
api_router.include_router(sales_router, prefix="/api", tags=["sales"])

__all__ = ["api_router"]
