from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from revolut.business import BusinessAuthenticationBuilder, business_client
from revolut.merchant import MerchantAuthenticationBuilder, merchant_client

TOKEN_PATH = "/api/1.0/auth/token"


@pytest.fixture
def anyio_backend():
    return "asyncio"


class Recorder:
    """``httpx.MockTransport`` handler that answers canned routes and keeps every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.token_calls = 0
        self.token_response: Any = None
        self.route("POST", TOKEN_PATH, self._token)

    def route(self, method: str, path: str, handler=None, *, status: int = 200, **kw) -> None:
        if handler is None:

            def handler(request):
                return httpx.Response(status, **kw)

        self._routes[(method, path)] = handler

    def _token(self, request: httpx.Request) -> httpx.Response:
        self.token_calls += 1
        if self.token_response is not None:
            return self.token_response(request)
        return httpx.Response(
            200,
            json={
                "access_token": f"tok-{self.token_calls}",
                "token_type": "bearer",
                "expires_in": 2399,
            },
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"code": 404, "message": "Not found"})
        return handler(request)

    @property
    def api_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path != TOKEN_PATH]

    @property
    def last(self) -> httpx.Request:
        return self.api_requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def business_auth():
    return (
        BusinessAuthenticationBuilder()
        .with_client_assertion("assertion-jwt")
        .with_refresh_token("refresh-1")
        .build()
    )


@pytest.fixture
def merchant_auth():
    return MerchantAuthenticationBuilder().with_secret_key("sk_test").build()


@pytest.fixture
def business_sandbox(recorder, business_auth):
    return (
        business_client()
        .with_sandbox_environment()
        .with_authentication(business_auth)
        .build(transport=recorder.transport())
    )


@pytest.fixture
def business_production(recorder, business_auth):
    return (
        business_client()
        .with_production_environment()
        .with_authentication(business_auth)
        .build(transport=recorder.transport())
    )


@pytest.fixture
def merchant_sandbox(recorder, merchant_auth):
    return (
        merchant_client()
        .with_sandbox_environment()
        .with_authentication(merchant_auth)
        .build(transport=recorder.transport())
    )


@pytest.fixture
def merchant_production(recorder, merchant_auth):
    return (
        merchant_client()
        .with_production_environment()
        .with_authentication(merchant_auth)
        .build(transport=recorder.transport())
    )
