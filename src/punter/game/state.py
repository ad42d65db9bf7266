from __future__ import annotations

from dataclasses import dataclass

from .map import Map


@dataclass
class GameState:
    punter: int
    punters: int
    map: Map

    def clone(self) -> "GameState":
        return GameState(punter=self.punter, punters=self.punters, map=self.map.clone())


def initial_state(punter: int, punters: int, game_map: Map) -> GameState:
    game_map.reindex()
    return GameState(punter=punter, punters=punters, map=game_map)
