"""Business API credentials and access-token lifecycle.

Two pieces live here:

* :class:`BusinessAuthenticationBuilder` assembles a
  :class:`BusinessAuthentication` (client assertion plus exactly one grant:
  refresh token or authorization code).
* :class:`TokenManager` caches the bearer token obtained from
  ``POST /api/1.0/auth/token`` and refreshes it once it has expired.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Type, TypeVar

import httpx
from prometheus_client import Counter, Gauge
from pydantic import BaseModel, ValidationError

from .. import config
from ..environment import Environment
from ..errors import CannotLogIn, IncompleteBuilder

_LOG = logging.getLogger(__name__)

_TOKENS_ISSUED = Counter(
    "revolut_oauth_tokens_issued_total", "OAuth tokens issued", ["grant"]
)
_LOGIN_ERRORS = Counter(
    "revolut_oauth_login_errors_total",
    "OAuth token request errors",
    ["grant", "reason"],
)
_TOKEN_EXPIRY_SEC = Gauge(
    "revolut_oauth_token_expiry_seconds", "Seconds until token expiry", ["grant"]
)

__all__ = [
    "BusinessAuthentication",
    "BusinessAuthenticationBuilder",
    "ClientAuthenticationResponse",
    "ClientAuthenticationWithRefreshTokenResponse",
    "CachedToken",
    "TokenManager",
]

T = TypeVar("T", bound=BaseModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BusinessAuthentication:
    """Finished Business credentials; exactly one grant field is set."""

    client_assertion: str = field(repr=False)
    authorization_code: Optional[str] = field(default=None, repr=False)
    refresh_token: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class BusinessAuthenticationBuilder:
    """Collects the Business credential slots one at a time.

    Setting a slot twice replaces the previous value. ``build()`` needs the
    client assertion and exactly one of refresh token / authorization code.
    """

    client_assertion: Optional[str] = field(default=None, repr=False)
    authorization_code: Optional[str] = field(default=None, repr=False)
    refresh_token: Optional[str] = field(default=None, repr=False)

    def with_client_assertion(self, client_assertion: str) -> "BusinessAuthenticationBuilder":
        return replace(self, client_assertion=str(client_assertion))

    def with_environment_inherited_client_assertion(
        self, variable: str = config.CLIENT_ASSERTION_ENV
    ) -> "BusinessAuthenticationBuilder":
        return self.with_client_assertion(config.from_environment(variable))

    def with_authorization_code(self, authorization_code: str) -> "BusinessAuthenticationBuilder":
        return replace(self, authorization_code=str(authorization_code))

    def with_environment_inherited_authorization_code(
        self, variable: str = config.AUTHORIZATION_CODE_ENV
    ) -> "BusinessAuthenticationBuilder":
        return self.with_authorization_code(config.from_environment(variable))

    def with_refresh_token(self, refresh_token: str) -> "BusinessAuthenticationBuilder":
        return replace(self, refresh_token=str(refresh_token))

    def with_environment_inherited_refresh_token(
        self, variable: str = config.REFRESH_TOKEN_ENV
    ) -> "BusinessAuthenticationBuilder":
        return self.with_refresh_token(config.from_environment(variable))

    def build(self) -> BusinessAuthentication:
        if self.client_assertion is None:
            raise IncompleteBuilder("business authentication is missing the client assertion")
        if self.authorization_code is None and self.refresh_token is None:
            raise IncompleteBuilder(
                "business authentication needs a refresh token or an authorization code"
            )
        if self.authorization_code is not None and self.refresh_token is not None:
            raise IncompleteBuilder(
                "business authentication takes either a refresh token or an "
                "authorization code, not both"
            )
        return BusinessAuthentication(
            client_assertion=self.client_assertion,
            authorization_code=self.authorization_code,
            refresh_token=self.refresh_token,
        )


# ---------------------------------------------------------------------------
# Token endpoint
# ---------------------------------------------------------------------------


class ClientAuthenticationResponse(BaseModel):
    access_token: str
    token_type: str
    expires_in: int


class ClientAuthenticationWithRefreshTokenResponse(ClientAuthenticationResponse):
    refresh_token: str


@dataclass(frozen=True)
class CachedToken:
    access_token: str = field(repr=False)
    expires_at: datetime

    def is_fresh(self, now: datetime) -> bool:
        return self.expires_at > now


class TokenManager:
    """Owns the cached bearer token of one Business client.

    ``ensure_logged_in`` runs under a per-instance ``asyncio.Lock``, so
    concurrent requests that find the token stale trigger a single login.
    The cache is only ever replaced as a whole.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        environment: Environment,
        authentication: BusinessAuthentication,
    ) -> None:
        self._http = http
        self._environment = environment
        self._authentication = authentication
        self._token: Optional[CachedToken] = None
        self._lock = asyncio.Lock()

    @property
    def token(self) -> Optional[CachedToken]:
        return self._token

    async def ensure_logged_in(self) -> None:
        async with self._lock:
            token = self._token
            if token is not None and token.is_fresh(_utcnow()):
                return
            await self.login()

    async def login(self) -> CachedToken:
        """Refresh the access token with the refresh-token grant."""
        response = await self.login_with_refresh_token()
        token = CachedToken(
            access_token=response.access_token,
            expires_at=_utcnow() + timedelta(seconds=response.expires_in),
        )
        self._token = token
        _TOKEN_EXPIRY_SEC.labels("refresh_token").set(response.expires_in)
        _LOG.info("Issued business access token; expires_at=%s", token.expires_at.isoformat())
        return token

    async def login_with_refresh_token(self) -> ClientAuthenticationResponse:
        refresh_token = self._authentication.refresh_token
        if refresh_token is None:
            _LOGIN_ERRORS.labels("refresh_token", "missing_grant").inc()
            raise CannotLogIn("missing refresh token")
        return await self._token_request(
            "refresh_token",
            {"grant_type": "refresh_token", "refresh_token": refresh_token},
            ClientAuthenticationResponse,
        )

    async def login_with_authorization_code(self) -> ClientAuthenticationWithRefreshTokenResponse:
        """Exchange the authorization code for tokens.

        The returned refresh token is not stored; persist it and build a
        refresh-token authentication for subsequent sessions.
        """
        authorization_code = self._authentication.authorization_code
        if authorization_code is None:
            _LOGIN_ERRORS.labels("authorization_code", "missing_grant").inc()
            raise CannotLogIn("missing authorization code")
        return await self._token_request(
            "authorization_code",
            {"grant_type": "authorization_code", "code": authorization_code},
            ClientAuthenticationWithRefreshTokenResponse,
        )

    async def _token_request(self, grant: str, params: Dict[str, str], response_type: Type[T]) -> T:
        data = {
            **params,
            "client_assertion_type": config.CLIENT_ASSERTION_TYPE,
            "client_assertion": self._authentication.client_assertion,
        }
        url = self._environment.uri("1.0", "/auth/token")
        try:
            resp = await self._http.post(url, data=data)
        except httpx.HTTPError as exc:
            _LOGIN_ERRORS.labels(grant, "transport").inc()
            _LOG.warning("Token request failed; grant=%s error=%s", grant, exc)
            raise CannotLogIn(f"{type(exc).__name__}: {exc}") from exc

        if not resp.is_success:
            _LOGIN_ERRORS.labels(grant, "status").inc()
            _LOG.warning("Token endpoint answered %s; grant=%s", resp.status_code, grant)
            raise CannotLogIn(f"token endpoint answered {resp.status_code}: {resp.text}")

        try:
            payload = response_type.model_validate_json(resp.content)
        except ValidationError as exc:
            _LOGIN_ERRORS.labels(grant, "decode").inc()
            raise CannotLogIn(f"cannot decode token response: {exc}") from exc
        _TOKENS_ISSUED.labels(grant).inc()
        return payload
