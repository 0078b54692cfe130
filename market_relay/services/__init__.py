"""Service layer exports."""

from .extraction import ProductIdExtractor
from .metafields import AllowedMarketResolver, find_metafield
from .relay import MetafieldRelay
from .shopify import ShopifyAdminClient, encode_product_id

__all__ = [
    "ProductIdExtractor",
    "AllowedMarketResolver",
    "find_metafield",
    "MetafieldRelay",
    "ShopifyAdminClient",
    "encode_product_id",
]
