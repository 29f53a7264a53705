"""Order map endpoints.

Stateless wrappers over ``app.logic.order_map``: every request carries the
full map and every response returns the resulting map. Nothing is stored.
"""

from __future__ import annotations

from typing import Dict, Optional
import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

import app.logic.order_map as order_map_logic
from app.http.problem import PROBLEM_MEDIA_TYPE
from app.logic.problem_factory import problem_order_map_too_large
from app.models.order_map import (
    ApplyMappingsRequest,
    ChangeMinOrderRequest,
    NormalizeRequest,
    OrderMapResult,
    PositionRequest,
)


logger = logging.getLogger(__name__)


router = APIRouter()


def _oversized(request: Request, **maps: Dict[str, int]) -> Optional[JSONResponse]:
    """Return a 422 problem response when any map exceeds the configured limit.

    Runs after pydantic has parsed the body, so ``max_entries`` bounds the
    work done on a map, not the cost of decoding the request.
    """
    limit = request.app.state.config.order_map.max_entries
    for field, value in maps.items():
        if len(value) > limit:
            logger.warning("order_maps:too_large field=%s size=%s limit=%s", field, len(value), limit)
            problem = problem_order_map_too_large(field, len(value), limit)
            return JSONResponse(problem, status_code=422, media_type=PROBLEM_MEDIA_TYPE)
    return None


def _result(order_map: Dict[str, int]) -> JSONResponse:
    return JSONResponse(OrderMapResult(order_map=order_map).model_dump(), status_code=200)


@router.post("/order-maps/apply", summary="Apply order mappings", response_model=OrderMapResult)
def post_apply_mappings(body: ApplyMappingsRequest, request: Request) -> Response:
    """POST /order-maps/apply.

    Moves existing ids and adds new ones in the order the mappings are
    given, then returns the normalised map.
    """
    logger.info("order_maps_apply:start base_cnt=%s mappings_cnt=%s", len(body.base), len(body.mappings))
    problem = _oversized(request, base=body.base, mappings=body.mappings)
    if problem is not None:
        return problem
    result = order_map_logic.apply_mappings(body.base, body.mappings)
    logger.info("order_maps_apply:complete result_cnt=%s", len(result))
    return _result(result)


@router.post("/order-maps/move", summary="Move an id", response_model=OrderMapResult)
def post_move_at_order(body: PositionRequest, request: Request) -> Response:
    """POST /order-maps/move. The returned map is not normalised."""
    logger.info("order_maps_move:start id=%s order=%s", body.id, body.order)
    problem = _oversized(request, order_map=body.order_map)
    if problem is not None:
        return problem
    return _result(order_map_logic.move_at_order(body.order_map, body.id, body.order))


@router.post("/order-maps/place", summary="Place an id", response_model=OrderMapResult)
def post_place_at_order(body: PositionRequest, request: Request) -> Response:
    logger.info("order_maps_place:start id=%s order=%s", body.id, body.order)
    problem = _oversized(request, order_map=body.order_map)
    if problem is not None:
        return problem
    return _result(order_map_logic.place_at_order(body.order_map, body.id, body.order))


@router.post("/order-maps/add", summary="Add a new id", response_model=OrderMapResult)
def post_add_at_order(body: PositionRequest, request: Request) -> Response:
    logger.info("order_maps_add:start id=%s order=%s", body.id, body.order)
    problem = _oversized(request, order_map=body.order_map)
    if problem is not None:
        return problem
    return _result(order_map_logic.add_at_order(body.order_map, body.id, body.order))


@router.post("/order-maps/normalize", summary="Normalise an order map", response_model=OrderMapResult)
def post_normalize(body: NormalizeRequest, request: Request) -> Response:
    logger.info("order_maps_normalize:start cnt=%s", len(body.order_map))
    problem = _oversized(request, order_map=body.order_map)
    if problem is not None:
        return problem
    return _result(order_map_logic.normalize(body.order_map))


@router.post("/order-maps/change-min-order", summary="Shift an order map", response_model=OrderMapResult)
def post_change_min_order(body: ChangeMinOrderRequest, request: Request) -> Response:
    """POST /order-maps/change-min-order. Gaps are preserved."""
    logger.info("order_maps_change_min:start cnt=%s new_min=%s", len(body.order_map), body.new_min_order)
    problem = _oversized(request, order_map=body.order_map)
    if problem is not None:
        return problem
    return _result(order_map_logic.change_min_order(body.order_map, body.new_min_order))


__all__ = ["router"]
