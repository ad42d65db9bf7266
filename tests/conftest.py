from __future__ import annotations

import copy
import io
from typing import List, Tuple

import pytest

from punter.game.map import Map, River, Site
from punter.game.state import GameState, initial_state
from punter.protocol.framing import decode, encode


class ChunkedReader(io.RawIOBase):
    """Hands out at most ``chunk`` bytes per read, like a slow socket."""

    def __init__(self, data: bytes, chunk: int = 3) -> None:
        self._data = data
        self._pos = 0
        self._chunk = chunk

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self._data)
        size = min(size, self._chunk)
        piece = self._data[self._pos : self._pos + size]
        self._pos += len(piece)
        return piece


class ScriptedServer:
    """Replays framed server messages and records what the client writes."""

    def __init__(self, *messages: object) -> None:
        self.reader = io.BytesIO(b"".join(encode(message) for message in messages))
        self.written = io.BytesIO()

    def read(self, size: int = -1) -> bytes:
        return self.reader.read(size)

    def write(self, data: bytes) -> int:
        return self.written.write(data)

    def flush(self) -> None:
        pass

    def sent(self) -> List[object]:
        stream = io.BytesIO(self.written.getvalue())
        messages = []
        while stream.tell() < len(stream.getvalue()):
            messages.append(decode(stream))
        return messages


def make_state(
    edges: List[Tuple[int, int]],
    mines: List[int],
    punter: int = 0,
    punters: int = 2,
    owners: dict | None = None,
) -> GameState:
    sites = sorted({site for edge in edges for site in edge} | set(mines))
    rivers = [River(source, target) for source, target in edges]
    for index, owner in (owners or {}).items():
        rivers[index].claimed = True
        rivers[index].owner = owner
    return initial_state(punter, punters, Map([Site(s) for s in sites], rivers, list(mines)))


SAMPLE_MAP = {
    "sites": [{"id": 4}, {"id": 1}, {"id": 3}, {"id": 6}, {"id": 5}, {"id": 0}, {"id": 7}, {"id": 2}],
    "rivers": [
        {"source": 3, "target": 4},
        {"source": 0, "target": 1},
        {"source": 2, "target": 3},
        {"source": 1, "target": 3},
        {"source": 5, "target": 6},
        {"source": 4, "target": 5},
        {"source": 3, "target": 5},
        {"source": 6, "target": 7},
        {"source": 5, "target": 7},
        {"source": 1, "target": 7},
        {"source": 0, "target": 7},
        {"source": 1, "target": 2},
    ],
    "mines": [1, 5],
}


@pytest.fixture
def sample_map() -> dict:
    return copy.deepcopy(SAMPLE_MAP)
