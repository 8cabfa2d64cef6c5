"""Revolut Business API: OAuth-style client assertion + refresh/authorization-code grants."""
from .auth import (
    BusinessAuthentication,
    BusinessAuthenticationBuilder,
    CachedToken,
    ClientAuthenticationResponse,
    ClientAuthenticationWithRefreshTokenResponse,
    TokenManager,
)
from .client import (
    BusinessClient,
    BusinessClientBuilder,
    BusinessProductionClient,
    BusinessSandboxClient,
    business_client,
)

__all__ = [
    "BusinessAuthentication",
    "BusinessAuthenticationBuilder",
    "CachedToken",
    "ClientAuthenticationResponse",
    "ClientAuthenticationWithRefreshTokenResponse",
    "TokenManager",
    "BusinessClient",
    "BusinessClientBuilder",
    "BusinessProductionClient",
    "BusinessSandboxClient",
    "business_client",
]
