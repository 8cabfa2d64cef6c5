"""Business API clients.

``business_client()`` starts a :class:`BusinessClientBuilder`; building it
returns :class:`BusinessSandboxClient` or :class:`BusinessProductionClient`,
each exposing only the resources offered in that environment.

Usage::

    client = (
        business_client()
        .with_sandbox_environment()
        .with_authentication(
            BusinessAuthenticationBuilder()
            .with_environment_inherited_client_assertion("REVOLUT_CLIENT_ASSERTION")
            .with_environment_inherited_refresh_token("REVOLUT_REFRESH_TOKEN")
            .build()
        )
        .build()
    )
    async with client:
        accounts = await client.accounts.list()
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import httpx

from ..client import Client, ClientBuilder
from ..environment import Environment, EnvironmentKind, Product
from ..errors import CannotLogIn
from .accounts import AccountsClient
from .auth import (
    BusinessAuthentication,
    ClientAuthenticationResponse,
    ClientAuthenticationWithRefreshTokenResponse,
    TokenManager,
)
from .cards import CardsClient
from .counterparties import CounterpartiesClient
from .expenses import ExpensesClient
from .foreign_exchange import ForeignExchangeClient
from .payout_links import PayoutLinksClient
from .simulations import SimulationsClient
from .transfers import TransfersClient
from .webhooks import WebhooksClient

__all__ = [
    "BusinessClient",
    "BusinessSandboxClient",
    "BusinessProductionClient",
    "BusinessClientBuilder",
    "business_client",
]


class BusinessClient(Client):
    """Resources available in both Business environments."""

    product = Product.BUSINESS
    authentication: BusinessAuthentication

    def __init__(
        self,
        environment: Environment,
        http: httpx.AsyncClient,
        authentication: BusinessAuthentication,
    ) -> None:
        super().__init__(environment, http, authentication)
        self.tokens = TokenManager(http, environment, authentication)
        self.accounts = AccountsClient(self)
        self.foreign_exchange = ForeignExchangeClient(self)
        self.payout_links = PayoutLinksClient(self)
        self.transfers = TransfersClient(self)
        self.webhooks = WebhooksClient(self)

    @property
    def access_token(self) -> Optional[str]:
        token = self.tokens.token
        return token.access_token if token else None

    @property
    def access_token_expires_at(self) -> Optional[datetime]:
        token = self.tokens.token
        return token.expires_at if token else None

    async def ensure_logged_in(self) -> None:
        await self.tokens.ensure_logged_in()

    async def login(self) -> None:
        await self.tokens.login()

    async def login_with_refresh_token(self) -> ClientAuthenticationResponse:
        return await self.tokens.login_with_refresh_token()

    async def login_with_authorization_code(self) -> ClientAuthenticationWithRefreshTokenResponse:
        return await self.tokens.login_with_authorization_code()

    async def _bearer_token(self) -> str:
        await self.tokens.ensure_logged_in()
        token = self.tokens.token
        if token is None:
            raise CannotLogIn("could not retrieve access token")
        return token.access_token


class BusinessSandboxClient(BusinessClient):
    def __init__(self, environment, http, authentication) -> None:
        super().__init__(environment, http, authentication)
        self.simulations = SimulationsClient(self)


class BusinessProductionClient(BusinessClient):
    def __init__(self, environment, http, authentication) -> None:
        super().__init__(environment, http, authentication)
        self.cards = CardsClient(self)
        self.counterparties = CounterpartiesClient(self)
        self.expenses = ExpensesClient(self)


@dataclass(frozen=True)
class BusinessClientBuilder(ClientBuilder[BusinessAuthentication]):
    product = Product.BUSINESS
    authentication_type = BusinessAuthentication
    client_classes = {
        EnvironmentKind.SANDBOX: BusinessSandboxClient,
        EnvironmentKind.PRODUCTION: BusinessProductionClient,
    }


def business_client() -> BusinessClientBuilder:
    return BusinessClientBuilder()
