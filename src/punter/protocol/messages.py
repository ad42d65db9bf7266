from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from punter.errors import MessageFormatError, UnrecognizedMessage
from punter.game.actions import Claim, Move, Pass, Score
from punter.game.map import Map
from punter.game.state import GameState
from punter.utils.serialization import (
    as_id,
    as_list,
    map_from_dict,
    require,
    state_from_dict,
    state_to_dict,
)


@dataclass(frozen=True)
class HandshakeRequest:
    me: str

    def to_dict(self) -> Dict[str, Any]:
        return {"me": self.me}


@dataclass(frozen=True)
class HandshakeResponse:
    you: str

    @classmethod
    def from_dict(cls, record: Any) -> "HandshakeResponse":
        you = require(record, "you")
        if not isinstance(you, str):
            raise MessageFormatError("Field 'you' must be a string")
        return cls(you)


@dataclass
class SetupRequest:
    punter: int
    punters: int
    map: Map

    @classmethod
    def from_dict(cls, record: Any) -> "SetupRequest":
        return cls(
            punter=as_id(require(record, "punter"), "punter"),
            punters=as_id(require(record, "punters"), "punters"),
            map=map_from_dict(require(record, "map")),
        )


@dataclass
class SetupResponse:
    ready: int
    state: Optional[GameState] = None

    def to_dict(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"ready": self.ready}
        if self.state is not None:
            record["state"] = state_to_dict(self.state)
        return record


@dataclass
class MoveReport:
    moves: List[Move]
    state: Optional[GameState] = None


@dataclass
class StopReport:
    moves: List[Move]
    scores: List[Score]
    state: Optional[GameState] = None


@dataclass
class MoveResponse:
    move: Move
    state: Optional[GameState] = None

    def to_dict(self) -> Dict[str, Any]:
        record = move_to_dict(self.move)
        if self.state is not None:
            record["state"] = state_to_dict(self.state)
        return record


ServerMessage = Union[SetupRequest, MoveReport, StopReport]


def move_to_dict(move: Move) -> Dict[str, Any]:
    if isinstance(move, Claim):
        return {"claim": {"punter": move.punter, "source": move.source, "target": move.target}}
    if isinstance(move, Pass):
        return {"pass": {"punter": move.punter}}
    raise TypeError(f"Not a move: {move!r}")


def move_from_dict(record: Any) -> Move:
    if not isinstance(record, dict):
        raise MessageFormatError("A move must be an object")
    kinds = [key for key in ("claim", "pass") if key in record]
    if len(kinds) != 1:
        raise MessageFormatError(f"A move needs exactly one of 'claim' or 'pass', got {sorted(record)}")
    body = record[kinds[0]]
    punter = as_id(require(body, "punter"), "punter")
    if kinds[0] == "pass":
        return Pass(punter)
    return Claim(
        punter=punter,
        source=as_id(require(body, "source"), "source"),
        target=as_id(require(body, "target"), "target"),
    )


def _moves_from(record: Any) -> List[Move]:
    return [move_from_dict(entry) for entry in as_list(require(record, "moves"), "moves")]


def _embedded_state(record: Dict[str, Any]) -> Optional[GameState]:
    if record.get("state") is None:
        return None
    return state_from_dict(record["state"])


def parse_server_message(record: Any) -> ServerMessage:
    if not isinstance(record, dict):
        raise UnrecognizedMessage(f"Expected a JSON object, got {type(record).__name__}")
    if "punter" in record:
        return SetupRequest.from_dict(record)
    if "move" in record:
        return MoveReport(moves=_moves_from(record["move"]), state=_embedded_state(record))
    if "stop" in record:
        body = record["stop"]
        scores = [
            Score(
                punter=as_id(require(entry, "punter"), "punter"),
                score=_as_score(require(entry, "score")),
            )
            for entry in as_list(require(body, "scores"), "scores")
        ]
        return StopReport(moves=_moves_from(body), scores=scores, state=_embedded_state(record))
    raise UnrecognizedMessage(f"Unknown server message with keys {sorted(record)}")


def _as_score(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MessageFormatError(f"Score must be an integer, got {value!r}")
    return value
