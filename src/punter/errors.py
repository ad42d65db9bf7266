from __future__ import annotations


class PunterError(Exception):
    """Base class for every failure raised by the punter client."""


class FramingError(PunterError):
    """A length-prefixed frame was malformed or the stream ended inside it."""


class MessageFormatError(PunterError):
    """A frame payload did not decode into the expected message shape."""


class UnrecognizedMessage(PunterError):
    """A server message matched none of the known top-level shapes."""


class GraphInconsistency(PunterError):
    """A reported claim names a river that is not on the local map."""

    def __init__(self, source: int, target: int) -> None:
        super().__init__(f"No river {source}->{target} on the map")
        self.source = source
        self.target = target
