from __future__ import annotations

"""Shared pydantic schemas for the allowed-market relay."""

import json
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class Metafield(BaseModel):
    """A namespaced key/value annotation attached to a Shopify product."""

    namespace: Any = None
    key: Any = None
    value: Any = None


class MetafieldCollection(BaseModel):
    """Body of ``GET /products/{id}/metafields.json``."""

    metafields: List[Metafield] = Field(default_factory=list)


class AllowedMarketResponse(BaseModel):
    """Success payload of the validate-gift-card endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    allowed_market: Any = Field(..., alias="allowedMarket")


class ErrorResponse(BaseModel):
    error: str


class UpstreamResult(BaseModel):
    """Outcome of the single Admin API call, before interpretation."""

    url: str
    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def metafields(self) -> MetafieldCollection:
        try:
            payload = json.loads(self.body)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{self.url} did not return valid JSON") from exc

        if payload is None:
            raise ValueError("Metafields response was JSON null")
        if not isinstance(payload, dict):
            return MetafieldCollection()

        entries = payload.get("metafields")
        if entries is None:
            return MetafieldCollection()
        if not isinstance(entries, list):
            raise ValueError("metafields must be a JSON array")
        if any(entry is None for entry in entries):
            raise ValueError("metafields contains a null entry")

        # Scalar entries carry no namespace or key and can never match.
        return MetafieldCollection(
            metafields=[
                Metafield.model_validate(entry)
                for entry in entries
                if isinstance(entry, dict)
            ]
        )
