from __future__ import annotations

from typing import Optional

import numpy as np

from punter.errors import GraphInconsistency

from .map import Map
from .state import GameState


def locate_river(game_map: Map, source: int, target: int) -> Optional[int]:
    source_rivers = game_map.incident(source)
    target_rivers = game_map.incident(target)
    candidates = source_rivers if len(source_rivers) <= len(target_rivers) else target_rivers
    for index in candidates:
        river = game_map.rivers[index]
        if river.source == source and river.target == target:
            return index

    # The index may be stale, or the claim may name the river back to front.
    for index, river in enumerate(game_map.rivers):
        if (river.source, river.target) in ((source, target), (target, source)):
            return index
    return None


def apply_claim(state: GameState, source: int, target: int, owner: int) -> int:
    index = locate_river(state.map, source, target)
    if index is None:
        raise GraphInconsistency(source, target)
    river = state.map.rivers[index]
    river.claimed = True
    river.owner = owner
    return index


def claimed_mask(game_map: Map) -> np.ndarray:
    return np.fromiter(
        (river.claimed for river in game_map.rivers),
        dtype=bool,
        count=len(game_map.rivers),
    )


def rivers_left(game_map: Map) -> int:
    return int(np.count_nonzero(~claimed_mask(game_map)))


def first_unclaimed(game_map: Map) -> Optional[int]:
    free = np.flatnonzero(~claimed_mask(game_map))
    if free.size == 0:
        return None
    return int(free[0])


def owned_count(game_map: Map, punter: int) -> int:
    return sum(1 for river in game_map.rivers if river.owned_by(punter))
