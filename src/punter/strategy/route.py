from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from punter.game.map import Map
from punter.game.state import GameState


@dataclass(frozen=True)
class Extension:
    river: int
    score: int


@dataclass
class _Frame:
    site: int
    rivers: Iterator[int]
    entered: Optional[int]
    best: Optional[Extension] = field(default=None)

    def offer(self, candidate: Extension) -> None:
        if self.best is None or candidate.score > self.best.score:
            self.best = candidate


def best_extension(state: GameState) -> Optional[Extension]:
    """Find the unclaimed river that best extends a chain grown from a mine.

    Each mine is explored depth first along rivers owned by ``state.punter``.
    Unclaimed rivers met on the way are candidates scoring 1, and every owned
    river walked to reach one adds 1. The first highest-scoring candidate in
    traversal order wins.
    """
    best: Optional[Extension] = None
    for mine in state.map.mines:
        found = _explore(state.map, state.punter, mine)
        if found is not None and (best is None or found.score > best.score):
            best = found
    return best


def _explore(game_map: Map, punter: int, mine: int) -> Optional[Extension]:
    # Owned rivers on the current path; a river leaves the set when its frame is popped.
    visited: Set[int] = set()
    stack: List[_Frame] = [_Frame(mine, iter(game_map.incident(mine)), None)]
    while True:
        frame = stack[-1]
        index = next(frame.rivers, None)
        if index is None:
            stack.pop()
            if not stack:
                return frame.best
            visited.discard(frame.entered)
            if frame.best is not None and frame.best.score > 0:
                stack[-1].offer(Extension(frame.best.river, frame.best.score + 1))
            continue
        river = game_map.rivers[index]
        if not river.claimed:
            frame.offer(Extension(index, 1))
        elif river.owner == punter and index not in visited:
            visited.add(index)
            far = river.other_end(frame.site)
            stack.append(_Frame(far, iter(game_map.incident(far)), index))
