"""Endpoint resolution per product and environment.

Each environment hardcodes its host; nothing here is configurable at
runtime. Business endpoints are always versioned, Merchant endpoints exist
both with and without a version segment.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

__all__ = [
    "Product",
    "EnvironmentKind",
    "Endpoint",
    "Environment",
    "BusinessEnvironment",
    "MerchantEnvironment",
    "environment_for",
]


class Product(str, Enum):
    BUSINESS = "business"
    MERCHANT = "merchant"
    OPEN_BANKING = "open_banking"


class EnvironmentKind(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


class Endpoint(str):
    """Fully-qualified URL of a Revolut API endpoint."""


class Environment:
    product: Product

    def __init__(self, kind: EnvironmentKind, base_url: str) -> None:
        self.kind = kind
        self.base_url = base_url

    @property
    def is_sandbox(self) -> bool:
        return self.kind is EnvironmentKind.SANDBOX

    @property
    def is_production(self) -> bool:
        return self.kind is EnvironmentKind.PRODUCTION

    def uri(self, version: str, path: str) -> Endpoint:
        raise NotImplementedError

    def unversioned_uri(self, path: str) -> Endpoint:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r}, {self.base_url!r})"


class BusinessEnvironment(Environment):
    product = Product.BUSINESS

    def uri(self, version: str, path: str) -> Endpoint:
        return Endpoint(f"{self.base_url}/{version}{path}")

    def unversioned_uri(self, path: str) -> Endpoint:
        # Every Business endpoint carries a version; reaching this is a bug in
        # the calling resource module.
        raise NotImplementedError(
            f"business endpoints are always versioned, got unversioned path {path!r}"
        )


class MerchantEnvironment(Environment):
    product = Product.MERCHANT

    def uri(self, version: str, path: str) -> Endpoint:
        return self.unversioned_uri(f"/{version}{path}")

    def unversioned_uri(self, path: str) -> Endpoint:
        return Endpoint(f"{self.base_url}{path}")


_ENVIRONMENTS: Dict[Tuple[Product, EnvironmentKind], Environment] = {
    (Product.BUSINESS, EnvironmentKind.SANDBOX): BusinessEnvironment(
        EnvironmentKind.SANDBOX, "https://sandbox-b2b.revolut.com/api"
    ),
    (Product.BUSINESS, EnvironmentKind.PRODUCTION): BusinessEnvironment(
        EnvironmentKind.PRODUCTION, "https://b2b.revolut.com/api"
    ),
    (Product.MERCHANT, EnvironmentKind.SANDBOX): MerchantEnvironment(
        EnvironmentKind.SANDBOX, "https://sandbox-merchant.revolut.com/api"
    ),
    (Product.MERCHANT, EnvironmentKind.PRODUCTION): MerchantEnvironment(
        EnvironmentKind.PRODUCTION, "https://merchant.revolut.com/api"
    ),
}


def environment_for(product: Product, kind: EnvironmentKind) -> Environment:
    """Return the environment for *product* × *kind*.

    Raises ``KeyError`` for products without published hosts (Open Banking).
    """
    return _ENVIRONMENTS[(product, kind)]
