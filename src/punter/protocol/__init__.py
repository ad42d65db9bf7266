from .framing import decode, encode, read_frame, send
from .messages import (
    HandshakeRequest,
    HandshakeResponse,
    MoveReport,
    MoveResponse,
    SetupRequest,
    SetupResponse,
    StopReport,
    parse_server_message,
)

__all__ = [
    "decode",
    "encode",
    "read_frame",
    "send",
    "HandshakeRequest",
    "HandshakeResponse",
    "MoveReport",
    "MoveResponse",
    "SetupRequest",
    "SetupResponse",
    "StopReport",
    "parse_server_message",
]
