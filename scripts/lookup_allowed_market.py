from __future__ import annotations

"""Resolve a product's allowed market from the shell, without the HTTP layer."""

import argparse
import asyncio
import sys

from market_relay.config import ConfigurationError, RelaySettings, configure_logging
from market_relay.errors import RelayError
from market_relay.services import MetafieldRelay, ShopifyAdminClient


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the custom.allow_market metafield of one product."
    )
    parser.add_argument("product_id", help="Numeric product id or product GID.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    try:
        settings = RelaySettings.from_env()
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_logging(settings.log_level)
    relay = MetafieldRelay(ShopifyAdminClient.from_settings(settings))
    try:
        answer = asyncio.run(relay.allowed_market(args.product_id))
    except RelayError as exc:
        print(f"{exc.status_code}: {exc.message}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    print(answer.allowed_market)  # noqa: T201


if __name__ == "__main__":
    main()
