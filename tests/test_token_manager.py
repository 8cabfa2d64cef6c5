import asyncio
from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs

import httpx
import pytest

from revolut.business import (
    BusinessAuthenticationBuilder,
    CachedToken,
    ClientAuthenticationWithRefreshTokenResponse,
    business_client,
)
from revolut.business import auth as auth_module
from revolut.errors import CannotLogIn

TOKEN_PATH = "/api/1.0/auth/token"

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class _Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock(monkeypatch):
    c = _Clock(T0)
    monkeypatch.setattr(auth_module, "_utcnow", c)
    return c


@pytest.fixture
def accounts_route(recorder):
    recorder.route("GET", "/api/1.0/accounts", json=[])
    return recorder


def _form(request: httpx.Request):
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def test_token_freshness_is_strict():
    token = CachedToken(access_token="t", expires_at=T0)
    assert token.is_fresh(T0 - timedelta(seconds=1))
    assert not token.is_fresh(T0)


@pytest.mark.anyio
async def test_first_request_logs_in(business_sandbox, accounts_route, clock):
    await business_sandbox.accounts.list()

    assert accounts_route.token_calls == 1
    assert business_sandbox.access_token == "tok-1"
    assert business_sandbox.access_token_expires_at == T0 + timedelta(seconds=2399)
    assert accounts_route.last.headers["Authorization"] == "Bearer tok-1"


@pytest.mark.anyio
async def test_fresh_token_is_reused_and_stale_token_refreshed_once(
    business_sandbox, accounts_route, clock
):
    await business_sandbox.accounts.list()
    clock.now = T0 + timedelta(seconds=2398)
    await business_sandbox.accounts.list()
    assert accounts_route.token_calls == 1

    clock.now = T0 + timedelta(seconds=2400)
    await business_sandbox.accounts.list()

    assert accounts_route.token_calls == 2
    assert accounts_route.last.headers["Authorization"] == "Bearer tok-2"
    # login happens before the API request is sent
    paths = [r.url.path for r in accounts_route.requests]
    assert paths[-2:] == [TOKEN_PATH, "/api/1.0/accounts"]


@pytest.mark.anyio
async def test_concurrent_requests_share_one_login(business_sandbox, accounts_route, clock):
    await asyncio.gather(*(business_sandbox.accounts.list() for _ in range(5)))

    assert accounts_route.token_calls == 1
    assert len(accounts_route.api_requests) == 5


@pytest.mark.anyio
async def test_refresh_grant_form(business_sandbox, recorder, clock):
    await business_sandbox.login()

    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://sandbox-b2b.revolut.com/api/1.0/auth/token"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert _form(request) == {
        "grant_type": "refresh_token",
        "refresh_token": "refresh-1",
        "client_assertion_type": "urn:ietf:params:oauth:client-assertion-type:jwt-bearer",
        "client_assertion": "assertion-jwt",
    }


@pytest.mark.anyio
async def test_authorization_code_grant(recorder, clock):
    recorder.token_response = lambda request: httpx.Response(
        200,
        json={
            "access_token": "oa_prod_at",
            "token_type": "bearer",
            "expires_in": 2399,
            "refresh_token": "oa_prod_rt",
        },
    )
    auth = (
        BusinessAuthenticationBuilder()
        .with_client_assertion("jwt")
        .with_authorization_code("oa_code")
        .build()
    )
    client = (
        business_client()
        .with_production_environment()
        .with_authentication(auth)
        .build(transport=recorder.transport())
    )

    response = await client.login_with_authorization_code()

    assert isinstance(response, ClientAuthenticationWithRefreshTokenResponse)
    assert response.refresh_token == "oa_prod_rt"
    form = _form(recorder.requests[0])
    assert form["grant_type"] == "authorization_code"
    assert form["code"] == "oa_code"
    assert "refresh_token" not in form
    # the exchange does not populate the refresh cycle's cache
    assert client.access_token is None


@pytest.mark.anyio
async def test_missing_grant_field(business_sandbox, recorder):
    with pytest.raises(CannotLogIn):
        await business_sandbox.login_with_authorization_code()
    assert recorder.token_calls == 0


@pytest.mark.anyio
async def test_rejected_login_aborts_request(business_sandbox, accounts_route, clock):
    accounts_route.token_response = lambda request: httpx.Response(
        401, json={"error": "invalid_grant"}
    )

    with pytest.raises(CannotLogIn):
        await business_sandbox.accounts.list()

    assert business_sandbox.access_token is None
    assert accounts_route.api_requests == []


@pytest.mark.anyio
async def test_failed_refresh_keeps_previous_token(business_sandbox, accounts_route, clock):
    await business_sandbox.accounts.list()
    clock.now = T0 + timedelta(hours=1)
    accounts_route.token_response = lambda request: httpx.Response(200, text="not json")

    with pytest.raises(CannotLogIn):
        await business_sandbox.accounts.list()

    assert business_sandbox.access_token == "tok-1"
    assert business_sandbox.access_token_expires_at == T0 + timedelta(seconds=2399)


@pytest.mark.anyio
async def test_transport_failure_during_login(business_sandbox, recorder):
    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    recorder.token_response = _refuse

    with pytest.raises(CannotLogIn) as excinfo:
        await business_sandbox.ensure_logged_in()
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
