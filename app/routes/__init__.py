"""APIRouter registration for the Order Map Service."""

from __future__ import annotations

from fastapi import APIRouter

from app.routes.order_by import router as order_by_router
from app.routes.order_maps import router as order_maps_router

api_router = APIRouter()
api_router.include_router(order_maps_router, tags=["OrderMaps"])
api_router.include_router(order_by_router, tags=["ProductCollection"])

__all__ = ["api_router"]
