from __future__ import annotations

import json
import logging
import socket
from typing import Any, BinaryIO

from punter.errors import FramingError, MessageFormatError

LOGGER = logging.getLogger(__name__)

DELIMITER = b":"
MAX_LENGTH_DIGITS = 12


def encode(message: Any) -> bytes:
    """Serialize ``message`` as compact JSON behind a ``<length>:`` prefix."""
    payload = json.dumps(message, separators=(",", ":")).encode("utf-8")
    return str(len(payload)).encode("ascii") + DELIMITER + payload


def _read_some(stream: BinaryIO, size: int) -> bytes:
    try:
        return stream.read(size)
    except socket.timeout as exc:
        raise FramingError("Timed out waiting for the server") from exc


def read_length(stream: BinaryIO) -> int:
    digits = b""
    while True:
        byte = _read_some(stream, 1)
        if not byte:
            raise FramingError("Stream closed before the frame length was read")
        if byte == DELIMITER:
            break
        if byte.isspace() and not digits:
            continue
        if not byte.isdigit():
            raise FramingError(f"Unexpected byte {byte!r} in frame length")
        digits += byte
        if len(digits) > MAX_LENGTH_DIGITS:
            raise FramingError("Frame length field is too long")
    if not digits:
        raise FramingError("Empty frame length")
    return int(digits)


def read_frame(stream: BinaryIO) -> bytes:
    length = read_length(stream)
    LOGGER.debug("Reading %d bytes", length)
    chunks = []
    remaining = length
    while remaining > 0:
        chunk = _read_some(stream, remaining)
        if not chunk:
            raise FramingError(f"Stream closed with {remaining} of {length} bytes unread")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def parse_payload(payload: bytes) -> Any:
    try:
        return json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise MessageFormatError(f"Payload is not valid JSON: {exc}") from exc


def decode(stream: BinaryIO) -> Any:
    payload = read_frame(stream)
    LOGGER.debug("Received %d bytes: %s", len(payload), payload)
    return parse_payload(payload)


def send(stream: BinaryIO, message: Any) -> None:
    frame = encode(message)
    LOGGER.debug("Sending %s", frame)
    stream.write(frame)
    stream.flush()
