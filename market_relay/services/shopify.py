from __future__ import annotations

"""Thin async client for the Shopify Admin REST metafields endpoint."""

import logging
from urllib.parse import quote

import httpx

from market_relay.config import DEFAULT_API_VERSION, RelaySettings
from market_relay.schemas import UpstreamResult

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone on top of quote()'s own safe set.
_PATH_SEGMENT_SAFE = "!~*'()"


def encode_product_id(product_id: str) -> str:
    """Percent-encode a product id (numeric or GID) for use as one path segment."""

    return quote(product_id, safe=_PATH_SEGMENT_SAFE)


def normalize_store_domain(store_domain: str) -> str:
    domain = store_domain.strip().rstrip("/")
    if "://" not in domain:
        domain = f"https://{domain}"
    return domain


class ShopifyAdminClient:
    """Issues the one Admin API request the relay needs per inbound call."""

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str = DEFAULT_API_VERSION,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.store_domain = normalize_store_domain(store_domain)
        self.api_version = api_version
        self._access_token = access_token
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: RelaySettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ShopifyAdminClient":
        return cls(
            settings.store_domain,
            settings.admin_token.get_secret_value(),
            settings.api_version,
            transport=transport,
        )

    def metafields_url(self, product_id: str) -> str:
        encoded = encode_product_id(product_id)
        return (
            f"{self.store_domain}/admin/api/{self.api_version}"
            f"/products/{encoded}/metafields.json"
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-Shopify-Access-Token": self._access_token,
            "Content-Type": "application/json",
        }

    async def fetch_metafields(self, product_id: str) -> UpstreamResult:
        """GET the product's metafields.

        Non-2xx answers come back as a result with ``ok`` false; transport
        failures (``httpx.RequestError``) propagate to the caller.
        """

        url = self.metafields_url(product_id)
        logger.info("Fetching metafields from URL: %s", url)

        async with httpx.AsyncClient(
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            response = await client.get(url, headers=self.headers)

        return UpstreamResult(
            url=url,
            status_code=response.status_code,
            body=response.text,
        )
