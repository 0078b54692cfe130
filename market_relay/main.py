"""Allowed-market App Proxy relay FastAPI application."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from market_relay.config import RelaySettings
from market_relay.errors import RelayError, UnexpectedFailure
from market_relay.schemas import AllowedMarketResponse, ErrorResponse
from market_relay.services import MetafieldRelay, ProductIdExtractor, ShopifyAdminClient

logger = logging.getLogger(__name__)

# Roughly what helmet() sends by default.
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
}

router = APIRouter()


def get_relay(request: Request) -> MetafieldRelay:
    return request.app.state.relay


def get_extractor(request: Request) -> ProductIdExtractor:
    return request.app.state.extractor


@router.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/apps/validate-gift-card",
    response_model=AllowedMarketResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        "default": {"model": ErrorResponse},
    },
)
async def validate_gift_card(
    request: Request,
    relay: MetafieldRelay = Depends(get_relay),
    extractor: ProductIdExtractor = Depends(get_extractor),
) -> AllowedMarketResponse:
    """Return the ``custom.allow_market`` metafield of a product, or ``"US"``."""

    try:
        product_id = await extractor.extract(request)
        return await relay.allowed_market(product_id)
    except RelayError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error in /validate-gift-card")
        raise UnexpectedFailure() from exc


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


async def security_headers(request: Request, call_next) -> Response:
    response: Response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


def create_app(
    settings: Optional[RelaySettings] = None,
    client: Optional[ShopifyAdminClient] = None,
) -> FastAPI:
    """Build the relay app; settings come from the environment when omitted."""

    settings = settings or RelaySettings.from_env()
    client = client or ShopifyAdminClient.from_settings(settings)

    app = FastAPI(
        title="market-relay",
        description=(
            "Shopify App Proxy endpoint that reports which market a product"
            " may be sold into, read from its custom.allow_market metafield."
        ),
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.relay = MetafieldRelay(client)
    app.state.extractor = ProductIdExtractor(settings.product_id_source)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
    app.middleware("http")(security_headers)
    app.add_exception_handler(RelayError, relay_error_handler)
    app.include_router(router)
    return app
