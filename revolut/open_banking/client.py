"""Open Banking placeholder.

The product is known to the builder machinery so that callers can name it,
but no hosts or authentication flows are published yet.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..client import Client, ClientBuilder
from ..environment import Product
from ..errors import UnsupportedEnvironment

__all__ = ["OpenBankingAuthentication", "OpenBankingClientBuilder", "openbanking_client"]


@dataclass(frozen=True)
class OpenBankingAuthentication:
    pass


@dataclass(frozen=True)
class OpenBankingClientBuilder(ClientBuilder[OpenBankingAuthentication]):
    product = Product.OPEN_BANKING
    authentication_type = OpenBankingAuthentication

    def build(
        self,
        *,
        transport: Optional[Any] = None,
        verify: Any = True,
        timeout: Optional[float] = None,
    ) -> Client:
        self._check_complete()
        assert self.environment is not None
        raise UnsupportedEnvironment(
            f"open banking clients are not available in the {self.environment.value} environment"
        )


def openbanking_client() -> OpenBankingClientBuilder:
    return OpenBankingClientBuilder()
