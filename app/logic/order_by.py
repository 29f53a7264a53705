"""Product collection sort order catalogue.

Options are encoded as ``"<orderBy>/<order>"`` (``order`` is ``asc`` or
``desc``) or a bare ``"<orderBy>"`` when the sort has no direction.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple
import logging


logger = logging.getLogger(__name__)

ASC = "asc"
DESC = "desc"

ORDER_OPTIONS: List[Dict[str, str]] = [
    {"value": "title/asc", "label": "A → Z"},
    {"value": "title/desc", "label": "Z → A"},
    {"value": "date/desc", "label": "Newest to oldest"},
    {"value": "date/asc", "label": "Oldest to newest"},
    {"value": "price/desc", "label": "Price, high to low"},
    {"value": "price/asc", "label": "Price, low to high"},
    {"value": "sales/desc", "label": "Sales, high to low"},
    {"value": "sales/asc", "label": "Sales, low to high"},
    {"value": "rating/desc", "label": "Rating, high to low"},
    {"value": "rating/asc", "label": "Rating, low to high"},
    # Custom ordering arranged by the store owner in the admin.
    {"value": "menu_order/asc", "label": "Manual (menu order)"},
    {"value": "random", "label": "Random"},
]

DEFAULT_QUERY: Dict[str, Optional[str]] = {"orderBy": "title", "order": ASC}

# "popularity" (Best Selling) was replaced by the sales options.
_LEGACY_ORDER_BY = {"popularity": "sales"}


class UnknownOrderOption(ValueError):
    """Raised when a value is not one of ``ORDER_OPTIONS``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"unknown order option: {value!r}")
        self.value = value


def option_values() -> List[str]:
    return [opt["value"] for opt in ORDER_OPTIONS]


def option_value(order_by: str, order: Optional[str]) -> str:
    """Return the option value selected for a query's ``orderBy``/``order``."""
    order_by = _LEGACY_ORDER_BY.get(order_by, order_by)
    if not order:
        return order_by
    return f"{order_by}/{order}"


def parse_option_value(value: str) -> Tuple[str, Optional[str]]:
    """Split an option value into ``(orderBy, order)``; ``order`` may be None."""
    if value not in option_values():
        logger.warning("order_by.parse unknown value=%s", value)
        raise UnknownOrderOption(value)
    order_by, _, order = value.partition("/")
    return order_by, (order or None)


def has_value(query: Dict[str, Optional[str]]) -> bool:
    """True when the query's sort differs from ``DEFAULT_QUERY``."""
    return (
        query.get("order") != DEFAULT_QUERY["order"]
        or query.get("orderBy") != DEFAULT_QUERY["orderBy"]
    )


def reset_query(query: Dict[str, Optional[str]]) -> Dict[str, Optional[str]]:
    # Only orderBy goes back to the default; the direction is kept.
    return {**query, "orderBy": DEFAULT_QUERY["orderBy"]}


def apply_option(query: Dict[str, Optional[str]], value: str) -> Dict[str, Optional[str]]:
    """Return ``query`` updated with the sort selected by option ``value``."""
    order_by, order = parse_option_value(value)
    updated = {**query, "orderBy": order_by, "order": order}
    logger.debug("order_by.apply value=%s query=%s", value, updated)
    return updated


__all__ = [
    "ASC",
    "DESC",
    "ORDER_OPTIONS",
    "DEFAULT_QUERY",
    "UnknownOrderOption",
    "option_values",
    "option_value",
    "parse_option_value",
    "has_value",
    "reset_query",
    "apply_option",
]
