"""Typed async client for the Revolut Business, Merchant and Open Banking APIs.

Pick a product builder (:func:`business_client`, :func:`merchant_client`),
choose an environment, attach the product's authentication and ``build()``.
Every failure surfaces as a subclass of :class:`revolut.errors.RevolutError`.
"""
from .business import BusinessAuthentication, BusinessAuthenticationBuilder, business_client
from .environment import EnvironmentKind, Product
from .errors import (
    BackendError,
    CannotInstantiateClient,
    CannotLogIn,
    ClientBuilderError,
    ClientError,
    IncompleteBuilder,
    MissingEnvironmentVariable,
    RequestError,
    RevolutError,
    SerializationError,
    UnsupportedEnvironment,
)
from .http import Delete, Get, Json, Multipart, Part, Patch, Post, Put, Raw
from .merchant import MerchantAuthentication, MerchantAuthenticationBuilder, merchant_client
from .open_banking import OpenBankingAuthentication, openbanking_client

__version__ = "0.1.0"

__all__ = [
    "BusinessAuthentication",
    "BusinessAuthenticationBuilder",
    "business_client",
    "MerchantAuthentication",
    "MerchantAuthenticationBuilder",
    "merchant_client",
    "OpenBankingAuthentication",
    "openbanking_client",
    "EnvironmentKind",
    "Product",
    "RevolutError",
    "ClientBuilderError",
    "ClientError",
    "MissingEnvironmentVariable",
    "CannotInstantiateClient",
    "IncompleteBuilder",
    "CannotLogIn",
    "RequestError",
    "SerializationError",
    "UnsupportedEnvironment",
    "BackendError",
    "Get",
    "Delete",
    "Post",
    "Patch",
    "Put",
    "Json",
    "Raw",
    "Multipart",
    "Part",
]
