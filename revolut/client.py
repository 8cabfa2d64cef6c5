"""Shared request dispatcher and client builder.

Uses ``httpx.AsyncClient`` with:
* bearer-token injection (the product subclass decides where the token
  comes from)
* a single decode/classify path for every response
* Prometheus counters + histogram (labels: product, method, status)

Product packages (:mod:`revolut.business`, :mod:`revolut.merchant`) subclass
:class:`Client` and :class:`ClientBuilder`. Tests inject an
``httpx.MockTransport`` through ``ClientBuilder.build(transport=...)``.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any, ClassVar, Dict, Generic, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from . import config
from .environment import Endpoint, Environment, EnvironmentKind, Product, environment_for
from .errors import (
    BackendError,
    BackendErrorBody,
    CannotInstantiateClient,
    IncompleteBuilder,
    RequestError,
    SerializationError,
    UnsupportedEnvironment,
)
from .http import LATENCY_SEC, REQUESTS_TOTAL, HttpMethod, build_request

__all__ = ["Client", "ClientBuilder", "require_environment"]

_LOG = logging.getLogger(__name__)

A = TypeVar("A")
R = TypeVar("R")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class Client:
    """Authenticated access to one product in one environment."""

    product: ClassVar[Product]

    def __init__(self, environment: Environment, http: httpx.AsyncClient, authentication: Any) -> None:
        self.environment = environment
        self.http = http
        self.authentication = authentication

    # ------------------------------------------------------------------
    # Product hooks
    # ------------------------------------------------------------------

    async def _bearer_token(self) -> str:
        """Return the credential for the ``Authorization`` header."""
        raise NotImplementedError

    def _extra_headers(self) -> Dict[str, str]:
        return {}

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def _send(self, method: HttpMethod, uri: Endpoint) -> httpx.Response:
        token = await self._bearer_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            **self._extra_headers(),
        }
        try:
            request = build_request(self.http, method, uri, headers)
        except PydanticSerializationError as exc:
            raise SerializationError(f"cannot encode request body: {exc}") from exc
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            raise RequestError(f"cannot build {method.verb} {uri!r}: {exc}") from exc
        log_extra = {
            "product": self.product.value,
            "environment": self.environment.kind.value,
            "method": method.verb,
            "endpoint": str(uri),
        }
        _LOG.debug("%s %s", method.verb, uri, extra=log_extra)

        start = time.perf_counter()
        try:
            response = await self.http.send(request)
        except httpx.HTTPError as exc:
            REQUESTS_TOTAL.labels(self.product.value, method.verb, "error").inc()
            _LOG.warning("%s %s failed: %s", method.verb, uri, exc, extra=log_extra)
            raise RequestError(f"{type(exc).__name__}: {exc}") from exc
        LATENCY_SEC.labels(self.product.value, method.verb).observe(time.perf_counter() - start)
        REQUESTS_TOTAL.labels(self.product.value, method.verb, response.status_code).inc()
        _LOG.debug(
            "%s %s -> %s",
            method.verb,
            uri,
            response.status_code,
            extra={**log_extra, "status": response.status_code},
        )

        if not response.is_success:
            raise self._backend_error(response, log_extra)
        return response

    @staticmethod
    def _backend_error(response: httpx.Response, log_extra: Dict[str, Any]) -> BackendError:
        try:
            body = BackendErrorBody.model_validate_json(response.content)
        except ValidationError as exc:
            raise SerializationError(
                f"cannot decode error body of {response!r}: {exc}"
            ) from exc
        _LOG.warning(
            "backend error %s: %s",
            response.status_code,
            body.message or body.error_code or body.code,
            extra={**log_extra, "status": response.status_code},
        )
        return BackendError(body, response.status_code)

    async def request(
        self,
        method: HttpMethod,
        uri: Endpoint,
        response_type: Optional[Union[Type[R], Any]] = None,
    ) -> Any:
        """Send *method* to *uri* and decode the body as *response_type*.

        ``response_type=None`` means the endpoint answers without a body and
        ``None`` is returned.
        """
        response = await self._send(method, uri)
        if response_type is None:
            return None
        try:
            return _adapter(response_type).validate_json(response.content)
        except ValidationError as exc:
            raise RequestError(f"{exc}: {response!r} {response.text}") from exc

    async def request_raw(self, method: HttpMethod, uri: Endpoint) -> bytes:
        """Same as :meth:`request` but return the undecoded payload."""
        response = await self._send(method, uri)
        return response.content

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(environment={self.environment!r})"


@dataclass(frozen=True)
class ClientBuilder(Generic[A]):
    """Runtime-checked builder: environment and authentication, each set once.

    Every ``with_*`` call returns a new builder, so a failed step never
    leaves a half-configured builder behind.
    """

    environment: Optional[EnvironmentKind] = None
    authentication: Optional[A] = None

    product: ClassVar[Product]
    authentication_type: ClassVar[type]
    client_classes: ClassVar[Mapping[EnvironmentKind, Type[Client]]] = {}

    def with_sandbox_environment(self) -> "ClientBuilder[A]":
        return self._with_environment(EnvironmentKind.SANDBOX)

    def with_production_environment(self) -> "ClientBuilder[A]":
        return self._with_environment(EnvironmentKind.PRODUCTION)

    def _with_environment(self, kind: EnvironmentKind) -> "ClientBuilder[A]":
        if self.environment is not None:
            raise IncompleteBuilder(
                f"{self.product.value} environment already set to {self.environment.value}"
            )
        return replace(self, environment=kind)

    def with_authentication(self, authentication: A) -> "ClientBuilder[A]":
        if self.authentication is not None:
            raise IncompleteBuilder(f"{self.product.value} authentication already set")
        if not isinstance(authentication, self.authentication_type):
            raise TypeError(
                f"{self.product.value} client expects {self.authentication_type.__name__}, "
                f"got {type(authentication).__name__}"
            )
        return replace(self, authentication=authentication)

    def _check_complete(self) -> None:
        missing = [
            name
            for name, value in (
                ("environment", self.environment),
                ("authentication", self.authentication),
            )
            if value is None
        ]
        if missing:
            raise IncompleteBuilder(
                f"cannot build {self.product.value} client: missing {', '.join(missing)}"
            )

    def build(
        self,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        verify: Any = True,
        timeout: Optional[float] = None,
    ) -> Client:
        self._check_complete()
        assert self.environment is not None
        environment = environment_for(self.product, self.environment)
        try:
            http = httpx.AsyncClient(
                timeout=config.HTTP_TIMEOUT if timeout is None else timeout,
                verify=verify,
                transport=transport,
            )
        except (OSError, ValueError, TypeError) as exc:
            raise CannotInstantiateClient(f"{type(exc).__name__}: {exc}") from exc
        client_class = self.client_classes[self.environment]
        _LOG.debug("built %s for %s", client_class.__name__, environment)
        return client_class(environment, http, self.authentication)


def require_environment(client: Client, kind: EnvironmentKind, resource: str) -> None:
    """Reject resources that the API does not offer in *client*'s environment."""
    if client.environment.kind is not kind:
        raise UnsupportedEnvironment(
            f"the {resource} API is only available in the {kind.value} environment"
        )
