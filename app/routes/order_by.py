"""Product collection order-by endpoints.

Serves the sort option catalogue, resolves a selected option into the
``orderBy``/``order`` query attributes of a product collection block, and
reports or resets the option a stored query displays.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

import app.logic.order_by as order_by_logic
from app.http.problem import PROBLEM_MEDIA_TYPE
from app.logic.problem_factory import problem_order_option_unknown
from app.models.order_by import (
    OrderOptionsCatalog,
    ProductCollectionQuery,
    SelectOrderRequest,
    SelectOrderResult,
)


logger = logging.getLogger(__name__)


router = APIRouter()


@router.get(
    "/product-collection/order-options",
    summary="Product collection order options",
    response_model=OrderOptionsCatalog,
)
def get_order_options() -> Response:  # noqa: D401
    """GET /product-collection/order-options.

    Returns the static option catalogue in display order plus the default
    query.
    """
    catalog = OrderOptionsCatalog(
        options=order_by_logic.ORDER_OPTIONS,
        default=ProductCollectionQuery(**order_by_logic.DEFAULT_QUERY),
    )
    return JSONResponse(catalog.model_dump(), status_code=200)


def _state(query: dict) -> SelectOrderResult:
    return SelectOrderResult(
        query=ProductCollectionQuery(**query),
        value=order_by_logic.option_value(query["orderBy"], query.get("order")),
        has_value=order_by_logic.has_value(query),
    )


@router.post(
    "/product-collection/order-by",
    summary="Select a product collection order",
    response_model=SelectOrderResult,
    responses={422: {"content": {"application/problem+json": {}}}},
)
def post_select_order(body: SelectOrderRequest) -> Response:
    """POST /product-collection/order-by.

    Applies the chosen option to ``query`` and echoes the option value the
    control should now show.
    """
    logger.info("order_by_select:start value=%s", body.value)
    try:
        updated = order_by_logic.apply_option(body.query.model_dump(), body.value)
    except order_by_logic.UnknownOrderOption as exc:
        logger.warning("order_by_select:unknown_option value=%s", exc.value)
        problem = problem_order_option_unknown(exc.value)
        return JSONResponse(problem, status_code=422, media_type=PROBLEM_MEDIA_TYPE)
    result = _state(updated)
    logger.info("order_by_select:complete value=%s has_value=%s", result.value, result.has_value)
    return JSONResponse(result.model_dump(), status_code=200)


@router.post(
    "/product-collection/order-by/value",
    summary="Displayed order option for a stored query",
    response_model=SelectOrderResult,
)
def post_order_by_value(body: ProductCollectionQuery) -> Response:
    """POST /product-collection/order-by/value.

    Resolves the option a stored query shows as selected; legacy
    ``popularity`` queries display as the matching ``sales`` option.
    """
    result = _state(body.model_dump())
    logger.info("order_by_value:complete order_by=%s value=%s", body.orderBy, result.value)
    return JSONResponse(result.model_dump(), status_code=200)


@router.post(
    "/product-collection/order-by/reset",
    summary="Reset a product collection order",
    response_model=SelectOrderResult,
)
def post_order_by_reset(body: ProductCollectionQuery) -> Response:
    """POST /product-collection/order-by/reset. Only ``orderBy`` is reset."""
    result = _state(order_by_logic.reset_query(body.model_dump()))
    logger.info("order_by_reset:complete value=%s has_value=%s", result.value, result.has_value)
    return JSONResponse(result.model_dump(), status_code=200)


__all__ = ["router"]
