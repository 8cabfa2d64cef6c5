"""Merchant API credentials: a static secret key, no refresh cycle."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .. import config
from ..errors import IncompleteBuilder

__all__ = ["MerchantAuthentication", "MerchantAuthenticationBuilder"]


@dataclass(frozen=True)
class MerchantAuthentication:
    secret_key: str = field(repr=False)


@dataclass(frozen=True)
class MerchantAuthenticationBuilder:
    secret_key: Optional[str] = field(default=None, repr=False)

    def with_secret_key(self, secret_key: str) -> "MerchantAuthenticationBuilder":
        return replace(self, secret_key=str(secret_key))

    def with_environment_inherited_secret_key(
        self, variable: str = config.SECRET_KEY_ENV
    ) -> "MerchantAuthenticationBuilder":
        return self.with_secret_key(config.from_environment(variable))

    def build(self) -> MerchantAuthentication:
        if self.secret_key is None:
            raise IncompleteBuilder("merchant authentication is missing the secret key")
        return MerchantAuthentication(secret_key=self.secret_key)
