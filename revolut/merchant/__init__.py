"""Revolut Merchant API: static secret-key authentication."""
from .auth import MerchantAuthentication, MerchantAuthenticationBuilder
from .client import (
    MerchantClient,
    MerchantClientBuilder,
    MerchantProductionClient,
    MerchantSandboxClient,
    merchant_client,
)

__all__ = [
    "MerchantAuthentication",
    "MerchantAuthenticationBuilder",
    "MerchantClient",
    "MerchantClientBuilder",
    "MerchantProductionClient",
    "MerchantSandboxClient",
    "merchant_client",
]
