from __future__ import annotations

from punter.game.actions import Claim, Move, Pass
from punter.game.rules import first_unclaimed
from punter.game.state import GameState


def pick_pass(state: GameState) -> Pass:
    return Pass(punter=state.punter)


def pick_first_unclaimed(state: GameState) -> Move:
    index = first_unclaimed(state.map)
    if index is None:
        return pick_pass(state)
    river = state.map.rivers[index]
    return Claim(punter=state.punter, source=river.source, target=river.target)
