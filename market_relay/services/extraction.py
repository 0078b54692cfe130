from __future__ import annotations

"""Read the product identifier from an inbound App Proxy request."""

import json
from typing import Any, Optional

from starlette.requests import Request

from market_relay.config import ProductIdSource
from market_relay.errors import MissingParameter

PRODUCT_ID_FIELD = "productId"


def _coerce(value: Any) -> Optional[str]:
    # bool is an int subclass but never a product id
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return None


class ProductIdExtractor:
    """Pulls ``productId`` from the JSON body, the query string, or both.

    ``body`` reads a JSON request body even on GET, which is how the relay
    has always behaved. The App Proxy only forwards query parameters, so
    deployments behind it need ``query`` or ``either``.
    """

    def __init__(self, source: ProductIdSource = "body") -> None:
        if source not in ("body", "query", "either"):
            raise ValueError(f"Unknown product id source: {source!r}")
        self.source = source

    async def extract(self, request: Request) -> str:
        product_id: Optional[str] = None
        if self.source in ("query", "either"):
            product_id = self._from_query(request)
        if product_id is None and self.source in ("body", "either"):
            product_id = await self._from_body(request)

        if product_id is None:
            raise MissingParameter()
        return product_id

    def _from_query(self, request: Request) -> Optional[str]:
        return _coerce(request.query_params.get(PRODUCT_ID_FIELD))

    async def _from_body(self, request: Request) -> Optional[str]:
        content_type = request.headers.get("content-type", "")
        if "json" not in content_type.lower():
            return None

        raw = await request.body()
        if not raw:
            return None
        try:
            payload = json.loads(raw)
        except ValueError:
            return None

        if not isinstance(payload, dict):
            return None
        return _coerce(payload.get(PRODUCT_ID_FIELD))
