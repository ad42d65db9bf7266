from __future__ import annotations

import logging

from punter.game.actions import Claim, Move
from punter.game.rules import rivers_left
from punter.game.state import GameState

from .fallback import pick_first_unclaimed, pick_pass
from .route import Extension, best_extension

LOGGER = logging.getLogger(__name__)


def choose_move(state: GameState) -> Move:
    if rivers_left(state.map) == 0:
        return pick_pass(state)
    extension = best_extension(state)
    if extension is not None and extension.score > 0:
        river = state.map.rivers[extension.river]
        LOGGER.debug("Extending route via river %d (score %d)", extension.river, extension.score)
        return Claim(punter=state.punter, source=river.source, target=river.target)
    return pick_first_unclaimed(state)


__all__ = [
    "Extension",
    "best_extension",
    "choose_move",
    "pick_first_unclaimed",
    "pick_pass",
]
