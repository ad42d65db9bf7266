from __future__ import annotations

import logging
import os
import socket
import sys
from typing import BinaryIO, Tuple

LOGGER = logging.getLogger(__name__)


class DuplexStream:
    """Joins a readable and a writable binary stream into one."""

    def __init__(self, reader: BinaryIO, writer: BinaryIO) -> None:
        self.reader = reader
        self.writer = writer

    def read(self, size: int = -1) -> bytes:
        return self.reader.read(size)

    def write(self, data: bytes) -> int:
        return self.writer.write(data)

    def flush(self) -> None:
        self.writer.flush()

    def close(self) -> None:
        self.writer.flush()


def connect(server: str, port: int, timeout: float | None = None) -> Tuple[socket.socket, BinaryIO]:
    LOGGER.info("Trying %s:%d", server, port)
    sock = socket.create_connection((server, port), timeout=timeout)
    return sock, sock.makefile("rwb")


def stdio_stream() -> DuplexStream:
    try:
        # Some relays hand over stdin in non-blocking mode.
        os.set_blocking(sys.stdin.fileno(), True)
    except (OSError, ValueError) as exc:
        LOGGER.debug("Leaving stdin mode unchanged: %s", exc)
    return DuplexStream(sys.stdin.buffer, sys.stdout.buffer)
