from __future__ import annotations

"""Glue between the Admin API client and the allowed-market resolver."""

import logging
from typing import Optional

from market_relay.errors import UpstreamError
from market_relay.schemas import AllowedMarketResponse
from market_relay.services.metafields import AllowedMarketResolver
from market_relay.services.shopify import ShopifyAdminClient

logger = logging.getLogger(__name__)


class MetafieldRelay:
    """Fetches a product's metafields and answers with its allowed market."""

    def __init__(
        self,
        client: ShopifyAdminClient,
        resolver: Optional[AllowedMarketResolver] = None,
    ) -> None:
        self.client = client
        self.resolver = resolver or AllowedMarketResolver()

    async def allowed_market(self, product_id: str) -> AllowedMarketResponse:
        result = await self.client.fetch_metafields(product_id)
        if not result.ok:
            logger.error("Shopify Admin API error (%s): %s", result.status_code, result.body)
            raise UpstreamError(result.status_code)

        return self.resolver.resolve(result.metafields(), product_id)
