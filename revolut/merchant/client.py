"""Merchant API clients.

Every request carries the static secret key as bearer token and pins the
API revision with the ``Revolut-Api-Version`` header.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import httpx

from .. import config
from ..client import Client, ClientBuilder
from ..environment import Environment, EnvironmentKind, Product
from ..errors import CannotLogIn
from .auth import MerchantAuthentication
from .disputes import DisputesClient
from .orders import OrdersClient
from .report_runs import ReportRunsClient
from .webhooks import WebhooksClient

__all__ = [
    "MerchantClient",
    "MerchantSandboxClient",
    "MerchantProductionClient",
    "MerchantClientBuilder",
    "merchant_client",
]


class MerchantClient(Client):
    """Resources available in both Merchant environments."""

    product = Product.MERCHANT
    authentication: MerchantAuthentication

    def __init__(
        self,
        environment: Environment,
        http: httpx.AsyncClient,
        authentication: MerchantAuthentication,
    ) -> None:
        super().__init__(environment, http, authentication)
        self.secret_key = authentication.secret_key
        self.orders = OrdersClient(self)
        self.report_runs = ReportRunsClient(self)
        self.webhooks = WebhooksClient(self)

    async def _bearer_token(self) -> str:
        if self.secret_key is None:
            raise CannotLogIn("could not retrieve secret key")
        return self.secret_key

    def _extra_headers(self) -> Dict[str, str]:
        return {"Revolut-Api-Version": config.MERCHANT_API_VERSION}


class MerchantSandboxClient(MerchantClient):
    pass


class MerchantProductionClient(MerchantClient):
    def __init__(self, environment, http, authentication) -> None:
        super().__init__(environment, http, authentication)
        self.disputes = DisputesClient(self)


@dataclass(frozen=True)
class MerchantClientBuilder(ClientBuilder[MerchantAuthentication]):
    product = Product.MERCHANT
    authentication_type = MerchantAuthentication
    client_classes = {
        EnvironmentKind.SANDBOX: MerchantSandboxClient,
        EnvironmentKind.PRODUCTION: MerchantProductionClient,
    }


def merchant_client() -> MerchantClientBuilder:
    return MerchantClientBuilder()
