from __future__ import annotations

"""Locate the allow_market metafield inside a product's metafield collection."""

import logging
from typing import Iterable, Optional

from market_relay.schemas import AllowedMarketResponse, Metafield, MetafieldCollection

logger = logging.getLogger(__name__)

ALLOW_MARKET_NAMESPACE = "custom"
ALLOW_MARKET_KEY = "allow_market"
DEFAULT_MARKET = "US"


def find_metafield(
    metafields: Iterable[Metafield], namespace: str, key: str
) -> Optional[Metafield]:
    """Return the first metafield matching ``namespace`` and ``key``."""

    for metafield in metafields:
        if metafield.namespace == namespace and metafield.key == key:
            return metafield
    return None


class AllowedMarketResolver:
    """Turns a metafield collection into the allowed-market answer."""

    def __init__(
        self,
        namespace: str = ALLOW_MARKET_NAMESPACE,
        key: str = ALLOW_MARKET_KEY,
        default: str = DEFAULT_MARKET,
    ) -> None:
        self.namespace = namespace
        self.key = key
        self.default = default

    def resolve(self, collection: MetafieldCollection, product_id: str) -> AllowedMarketResponse:
        metafield = find_metafield(collection.metafields, self.namespace, self.key)
        if metafield is None:
            logger.warning("No %s metafield found for product %s", self.key, product_id)
            return AllowedMarketResponse(allowed_market=self.default)

        logger.info("Found %s metafield: %s", self.key, metafield.value)
        return AllowedMarketResponse(allowed_market=metafield.value)
