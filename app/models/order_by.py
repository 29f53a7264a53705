"""Pydantic models for the product collection order-by endpoints."""

from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class OrderOption(BaseModel):
    value: str
    label: str


class ProductCollectionQuery(BaseModel):
    # Mirrors the block attribute names used by the editor
    model_config = ConfigDict(extra="allow")

    orderBy: str = "title"
    order: Optional[Literal["asc", "desc"]] = "asc"


class OrderOptionsCatalog(BaseModel):
    options: List[OrderOption]
    default: ProductCollectionQuery


class SelectOrderRequest(BaseModel):
    value: str
    query: ProductCollectionQuery = Field(default_factory=ProductCollectionQuery)


class SelectOrderResult(BaseModel):
    """Query, displayed option value and "has value" flag for the control."""
    query: ProductCollectionQuery
    value: str
    has_value: bool


__all__ = [
    "OrderOption",
    "ProductCollectionQuery",
    "OrderOptionsCatalog",
    "SelectOrderRequest",
    "SelectOrderResult",
]
