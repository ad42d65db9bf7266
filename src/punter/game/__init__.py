from .actions import Claim, Move, Pass, Score
from .map import Map, River, Site, build_adjacency_index
from .rules import apply_claim, first_unclaimed, locate_river, rivers_left
from .state import GameState, initial_state

__all__ = [
    "Claim",
    "Move",
    "Pass",
    "Score",
    "Map",
    "River",
    "Site",
    "build_adjacency_index",
    "apply_claim",
    "first_unclaimed",
    "locate_river",
    "rivers_left",
    "GameState",
    "initial_state",
]
