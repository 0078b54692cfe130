from __future__ import annotations

"""CLI entry point that runs the App Proxy relay under uvicorn."""

import argparse
import logging
import sys

import uvicorn

from market_relay.config import ConfigurationError, RelaySettings, configure_logging
from market_relay.main import create_app

logger = logging.getLogger("market_relay.serve")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the allowed-market relay.")
    parser.add_argument(
        "--host",
        default=None,
        help="Interface to bind (defaults to HOST or 0.0.0.0).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (defaults to PORT or 8080).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    try:
        settings = RelaySettings.from_env()
    except ConfigurationError as exc:
        configure_logging()
        logger.error("ERROR: %s", exc)
        sys.exit(1)

    configure_logging(settings.log_level)
    host = args.host or settings.host
    port = args.port or settings.port

    app = create_app(settings)
    logger.info("App Proxy running on port %s", port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
