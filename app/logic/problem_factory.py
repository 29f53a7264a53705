"""Centralised construction of problem+json payloads.

Route modules call these helpers instead of embedding codes and titles.
"""

from __future__ import annotations

from typing import Dict
import logging


logger = logging.getLogger(__name__)


def problem_order_map_too_large(field: str, size: int, limit: int) -> Dict[str, object]:
    """Return a 422 problem for an order map above the configured entry limit."""
    problem = {
        "title": "Order map too large",
        "status": 422,
        "detail": f"{field} has {size} entries; at most {limit} are accepted",
        "code": "ORDER_MAP_TOO_LARGE",
        "errors": [{"path": f"$.{field}", "code": "too_many_entries"}],
    }
    logger.info("error_handler.handle", extra={"code": problem["code"]})
    return problem


def problem_order_option_unknown(value: str) -> Dict[str, object]:
    """Return a 422 problem for a sort option outside the catalogue."""
    problem = {
        "title": "Unknown order option",
        "status": 422,
        "detail": f"{value!r} is not a product collection order option",
        "code": "ORDER_OPTION_UNKNOWN",
        "errors": [{"path": "$.value", "code": "unknown_option"}],
    }
    logger.info("error_handler.handle", extra={"code": problem["code"]})
    return problem


__all__ = [
    "problem_order_map_too_large",
    "problem_order_option_unknown",
]
