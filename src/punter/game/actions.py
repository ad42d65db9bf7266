from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union


@dataclass(frozen=True)
class Claim:
    punter: int
    source: int
    target: int


@dataclass(frozen=True)
class Pass:
    punter: int


Move = Union[Claim, Pass]


@dataclass(frozen=True)
class Score:
    punter: int
    score: int


def describe_move(move: Move) -> str:
    if isinstance(move, Claim):
        return f"claim {move.source}->{move.target} by {move.punter}"
    return f"pass by {move.punter}"


def claims_only(moves: List[Move]) -> List[Claim]:
    return [move for move in moves if isinstance(move, Claim)]
