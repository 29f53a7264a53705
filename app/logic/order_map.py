"""Order map reconciliation helpers.

An order map is a ``Dict[str, int]`` from identifier to ordinal position,
used to persist drag-and-drop ordering of settings entries. These helpers
move, insert and renumber identifiers the way a sortable list UI would,
then normalise the result to a dense 0-based sequence.

All functions are pure: they never mutate the mapping they receive and
always return a new dict. Iteration order of the input is significant and
is preserved (dicts keep insertion order); ties are resolved in favour of
the entry seen first.

Note the asymmetry between ``move_at_order`` and ``place_at_order``:
moving closes the gap left at the old slot, placing only bumps entries at
or after the target slot. Placing an id that already sits elsewhere
therefore leaves a gap behind it.
"""

from __future__ import annotations

from typing import Dict, Mapping
import logging


logger = logging.getLogger(__name__)

OrderMap = Dict[str, int]


def _sorted_by_order(order_map: Mapping[str, int]) -> OrderMap:
    # sorted() is stable, so equal orders keep their iteration order
    return dict(sorted(order_map.items(), key=lambda item: item[1]))


def apply_mappings(base_map: Mapping[str, int], new_mappings: Mapping[str, int]) -> OrderMap:
    """Apply ``new_mappings`` on top of ``base_map`` and return it normalised.

    ``new_mappings`` may be a full or partial list of the base ids, and may
    also carry ids not in the base. Base ids are moved, new ids are added,
    strictly in the iteration order of ``new_mappings``.
    """
    # Sort without normalising first: gaps in the base orders are meaningful.
    base = _sorted_by_order(base_map)
    updated = dict(base)
    for id_, order in new_mappings.items():
        if id_ not in base:
            updated = add_at_order(updated, id_, order)
            continue
        updated = move_at_order(updated, id_, order)
    result = normalize(updated)
    logger.debug(
        "order_map.apply_mappings base_cnt=%s mappings_cnt=%s result=%s",
        len(base),
        len(new_mappings),
        result,
    )
    return result


def move_at_order(order_map: Mapping[str, int], id_: str, order: int) -> OrderMap:
    """Move an existing id to ``order``, shifting the ids in between.

    - Moving down (``order`` above the current value): every id whose order
      lies in ``[current, order]`` is decreased by 1.
    - Moving up: every id whose order lies in ``[order, current]`` is
      increased by 1.

    Unknown ids are ignored. The result is not normalised.
    """
    updated = dict(order_map)
    if id_ not in updated:
        return updated
    existing = updated[id_]
    if existing == order:
        return updated
    if order not in updated.values():
        updated[id_] = order
        return updated

    if order > existing:
        for key, value in order_map.items():
            if existing <= value <= order:
                updated[key] = value - 1
    else:
        for key, value in order_map.items():
            if order <= value <= existing:
                updated[key] = value + 1
    updated[id_] = order
    logger.debug("order_map.move id=%s from=%s to=%s", id_, existing, order)
    return updated


def place_at_order(order_map: Mapping[str, int], id_: str, order: int) -> OrderMap:
    """Place ``id_`` at ``order``, bumping every id at or after that slot by 1.

    Does not close the gap at a previous slot of ``id_``; intended for fresh
    insertion (see ``add_at_order``).
    """
    updated = dict(order_map)
    if id_ in updated and updated[id_] == order:
        return updated
    if order not in updated.values():
        updated[id_] = order
        return updated

    for key, value in order_map.items():
        if value >= order:
            updated[key] = value + 1
    updated[id_] = order
    logger.debug("order_map.place id=%s at=%s", id_, order)
    return updated


def add_at_order(order_map: Mapping[str, int], id_: str, order: int) -> OrderMap:
    """Insert a new id at ``order``; ids already present are left as they are."""
    if id_ in order_map:
        return dict(order_map)
    return place_at_order(order_map, id_, order)


def normalize(order_map: Mapping[str, int]) -> OrderMap:
    """Sort by order and renumber to consecutive values starting at 0."""
    return {key: rank for rank, key in enumerate(_sorted_by_order(order_map))}


def change_min_order(order_map: Mapping[str, int], new_min_order: int) -> OrderMap:
    """Translate every order so the smallest one becomes ``new_min_order``.

    Gaps are kept as they are; the result is sorted ascending.
    """
    if not order_map:
        return {}
    bump = new_min_order - min(order_map.values())
    return _sorted_by_order({key: value + bump for key, value in order_map.items()})


__all__ = [
    "OrderMap",
    "apply_mappings",
    "move_at_order",
    "place_at_order",
    "add_at_order",
    "normalize",
    "change_min_order",
]
