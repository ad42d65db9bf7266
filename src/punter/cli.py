from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from punter.config import PunterConfig
from punter.errors import PunterError
from punter.session import OfflineSession, OnlineSession
from punter.transport import connect, stdio_stream

LOGGER = logging.getLogger("punter")


def build_parser() -> argparse.ArgumentParser:
    defaults = PunterConfig()
    parser = argparse.ArgumentParser(description="Play a river-claiming game as one punter.")
    parser.add_argument("--online", action="store_true", help="Use online mode (TCP session).")
    parser.add_argument("--server", type=str, default=defaults.server)
    parser.add_argument("--port", type=int, default=defaults.port)
    parser.add_argument("--name", type=str, default=defaults.name, help="Bot name sent in the handshake.")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait on the server before giving up (online mode only).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log frames and payloads.")
    return parser


def config_from_args(args: argparse.Namespace) -> PunterConfig:
    return PunterConfig(
        name=args.name,
        server=args.server,
        port=args.port,
        online=args.online,
        timeout=args.timeout,
    )


def run(config: PunterConfig) -> None:
    if config.online:
        LOGGER.info("online mode")
        sock, stream = connect(config.server, config.port, config.timeout)
        try:
            LOGGER.info("connected")
            result = OnlineSession(stream, config).run()
        finally:
            stream.close()
            sock.close()
        LOGGER.info("Game over, our score: %s", result.own_score())
    else:
        LOGGER.info("offline mode")
        OfflineSession(stdio_stream(), config).run_once()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="bi: %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    try:
        run(config_from_args(args))
    except (PunterError, OSError) as exc:
        LOGGER.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
