from __future__ import annotations

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from market_relay.config import RelaySettings
from market_relay.main import create_app
from market_relay.services.shopify import ShopifyAdminClient

STORE_DOMAIN = "https://relay-test.myshopify.com"
ADMIN_TOKEN = "shpat_test_token"


@pytest.fixture
def settings() -> RelaySettings:
    return RelaySettings(admin_token=ADMIN_TOKEN, store_domain=STORE_DOMAIN)


@pytest.fixture
def upstream_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(
    settings: RelaySettings, upstream_requests: list[httpx.Request]
) -> Callable[..., TestClient]:
    """Build a TestClient whose Admin API calls are answered by ``handler``."""

    def _make(handler, **overrides) -> TestClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            return handler(request)

        app_settings = settings.model_copy(update=overrides) if overrides else settings
        client = ShopifyAdminClient.from_settings(
            app_settings, transport=httpx.MockTransport(recording_handler)
        )
        return TestClient(create_app(app_settings, client=client))

    return _make
