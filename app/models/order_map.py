"""Pydantic models for order map request and response bodies.

``Dict`` fields keep the key order of the incoming JSON object, which the
order map operations depend on.

Orders are ``StrictInt``: JSON booleans, floats and numeric strings are
rejected with a 422 rather than coerced.
"""

from __future__ import annotations

from typing import Dict
from pydantic import BaseModel, Field, StrictInt


class ApplyMappingsRequest(BaseModel):
    base: Dict[str, StrictInt] = Field(default_factory=dict)
    mappings: Dict[str, StrictInt] = Field(default_factory=dict)


class PositionRequest(BaseModel):
    """Body shared by move, place and add."""
    order_map: Dict[str, StrictInt]
    id: str = Field(min_length=1)
    order: StrictInt


class NormalizeRequest(BaseModel):
    order_map: Dict[str, StrictInt]


class ChangeMinOrderRequest(BaseModel):
    order_map: Dict[str, StrictInt]
    new_min_order: StrictInt


class OrderMapResult(BaseModel):
    order_map: Dict[str, int]


__all__ = [
    "ApplyMappingsRequest",
    "PositionRequest",
    "NormalizeRequest",
    "ChangeMinOrderRequest",
    "OrderMapResult",
]
