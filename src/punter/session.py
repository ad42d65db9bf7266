from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, List, Optional, Tuple, Union

import numpy as np

from punter.config import PunterConfig
from punter.errors import GraphInconsistency, MessageFormatError, UnrecognizedMessage
from punter.game.actions import Claim, Score, claims_only, describe_move
from punter.game.rules import apply_claim, owned_count, rivers_left
from punter.game.state import GameState, initial_state
from punter.protocol import framing
from punter.protocol.messages import (
    HandshakeRequest,
    HandshakeResponse,
    MoveReport,
    MoveResponse,
    ServerMessage,
    SetupRequest,
    SetupResponse,
    StopReport,
    parse_server_message,
)
from punter.strategy import choose_move

LOGGER = logging.getLogger(__name__)


class Phase(Enum):
    CONNECTING = "connecting"
    HANDSHAKING = "handshaking"
    AWAITING_SETUP = "awaiting_setup"
    TURN_LOOP = "turn_loop"
    STOPPED = "stopped"


@dataclass
class GameResult:
    punter: Optional[int]
    scores: List[Score]

    def ranking(self) -> List[Score]:
        values = np.array([score.score for score in self.scores], dtype=np.int64)
        order = np.argsort(-values, kind="stable")
        return [self.scores[int(i)] for i in order]

    def own_score(self) -> Optional[int]:
        for score in self.scores:
            if score.punter == self.punter:
                return score.score
        return None


Reply = Union[SetupResponse, MoveResponse]


class Punter:
    """Turns server messages into replies; holds no game state of its own."""

    def __init__(self, config: PunterConfig | None = None) -> None:
        self.config = config or PunterConfig()

    @property
    def embeds_state(self) -> bool:
        return not self.config.online

    def handshake(self, stream: BinaryIO) -> HandshakeResponse:
        framing.send(stream, HandshakeRequest(self.config.name).to_dict())
        LOGGER.debug("Waiting for handshake reply")
        response = HandshakeResponse.from_dict(framing.decode(stream))
        if response.you != self.config.name:
            LOGGER.warning("Server greeted us as %r, expected %r", response.you, self.config.name)
        return response

    def setup(self, request: SetupRequest) -> Tuple[SetupResponse, GameState]:
        state = initial_state(request.punter, request.punters, request.map)
        LOGGER.info(
            "Punter %d of %d: %d sites, %d rivers, %d mines",
            state.punter,
            state.punters,
            len(state.map.sites),
            len(state.map.rivers),
            len(state.map.mines),
        )
        response = SetupResponse(ready=state.punter)
        if self.embeds_state:
            response.state = state
        return response, state

    def play(self, report: MoveReport, state: GameState) -> Tuple[MoveResponse, GameState]:
        state = state.clone()
        apply_moves(state, report)
        LOGGER.debug("%d rivers left", rivers_left(state.map))
        move = choose_move(state)
        LOGGER.info("Move: %s", describe_move(move))
        if self.config.record_own_moves and isinstance(move, Claim):
            apply_claim(state, move.source, move.target, move.punter)
        response = MoveResponse(move=move)
        if self.embeds_state:
            response.state = state
        return response, state

    def stop(self, report: StopReport, state: Optional[GameState] = None) -> GameResult:
        punter = state.punter if state is not None else None
        for score in report.scores:
            LOGGER.info("Punter: %d score: %d", score.punter, score.score)
        if state is not None:
            LOGGER.info("Finished owning %d rivers", owned_count(state.map, state.punter))
        return GameResult(punter=punter, scores=list(report.scores))

    def step(
        self, message: ServerMessage, state: Optional[GameState]
    ) -> Tuple[Optional[Reply], Optional[GameState], Optional[GameResult]]:
        """Advance the game by one server message.

        Returns the reply to send (None after a stop), the state to carry into
        the next turn and, once the game is over, its result.
        """
        if isinstance(message, SetupRequest):
            reply, state = self.setup(message)
            return reply, state, None
        if isinstance(message, MoveReport):
            if state is None:
                raise MessageFormatError("Turn message arrived without a game state")
            reply, state = self.play(message, state)
            return reply, state, None
        if isinstance(message, StopReport):
            return None, state, self.stop(message, state)
        raise UnrecognizedMessage(f"Cannot handle {type(message).__name__}")


def apply_moves(state: GameState, report: Union[MoveReport, StopReport]) -> int:
    applied = 0
    for claim in claims_only(report.moves):
        try:
            apply_claim(state, claim.source, claim.target, claim.punter)
        except GraphInconsistency as exc:
            LOGGER.warning("Skipping claim by punter %d: %s", claim.punter, exc)
            continue
        applied += 1
    return applied


class OnlineSession:
    """Plays a whole game over one long-lived connection."""

    def __init__(self, stream: BinaryIO, config: PunterConfig | None = None) -> None:
        self.stream = stream
        self.punter = Punter(config)
        self.phase = Phase.CONNECTING
        self.state: Optional[GameState] = None

    def _transition(self, phase: Phase) -> None:
        LOGGER.info("%s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _receive(self) -> ServerMessage:
        return parse_server_message(framing.decode(self.stream))

    def run(self) -> GameResult:
        self._transition(Phase.HANDSHAKING)
        self.punter.handshake(self.stream)

        self._transition(Phase.AWAITING_SETUP)
        message = self._receive()
        if not isinstance(message, SetupRequest):
            raise UnrecognizedMessage(f"Expected setup, got {type(message).__name__}")
        reply, self.state, _ = self.punter.step(message, None)
        framing.send(self.stream, reply.to_dict())

        self._transition(Phase.TURN_LOOP)
        while True:
            message = self._receive()
            if isinstance(message, SetupRequest):
                raise UnrecognizedMessage("Setup message received mid-game")
            reply, self.state, result = self.punter.step(message, self.state)
            if result is not None:
                self._transition(Phase.STOPPED)
                return result
            framing.send(self.stream, reply.to_dict())


class OfflineSession:
    """Handles exactly one server message per process.

    The game state travels inside the messages: every reply embeds it and
    every turn message hands the previous copy back.
    """

    def __init__(self, stream: BinaryIO, config: PunterConfig | None = None) -> None:
        self.stream = stream
        self.punter = Punter(config)

    def run_once(self) -> Optional[GameResult]:
        self.punter.handshake(self.stream)
        message = parse_server_message(framing.decode(self.stream))
        LOGGER.info("Handling %s", type(message).__name__)
        state = None if isinstance(message, SetupRequest) else message.state
        reply, _, result = self.punter.step(message, state)
        if reply is not None:
            framing.send(self.stream, reply.to_dict())
        return result
