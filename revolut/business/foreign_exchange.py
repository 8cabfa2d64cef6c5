"""Business foreign exchange API.

Available in sandbox and production environments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field

from ..http import Get, Json, Post, query_string
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = [
    "ExchangeRateParams",
    "AmountWithCurrency",
    "ExchangeRate",
    "ExchangeFromTo",
    "ExchangeRequest",
    "ExchangeState",
    "Exchange",
    "ForeignExchangeClient",
]


class ExchangeRateParams(ApiModel):
    from_: str = Field(alias="from")
    to: str
    amount: Optional[float] = None

    def to_query(self) -> str:
        return query_string([("from", self.from_), ("to", self.to), ("amount", self.amount)])

    def __str__(self) -> str:
        return self.to_query()


class AmountWithCurrency(ApiModel):
    amount: Optional[float] = None
    currency: Optional[str] = None


class ExchangeRate(ApiModel):
    from_: AmountWithCurrency = Field(alias="from")
    to: AmountWithCurrency
    rate: Optional[float] = None
    fee: AmountWithCurrency
    rate_date: str


class ExchangeFromTo(ApiModel):
    account_id: str
    currency: str
    amount: Optional[float] = None


class ExchangeRequest(ApiModel):
    from_: ExchangeFromTo = Field(alias="from")
    to: ExchangeFromTo
    reference: Optional[str] = None
    request_id: str
    exchange_reason_code: Optional[str] = None


class ExchangeState(ApiEnum):
    CREATED = "created"
    PENDING = "pending"
    COMPLETED = "completed"
    DECLINED = "declined"
    FAILED = "failed"
    REVERTED = "reverted"


class Exchange(ApiModel):
    id: Optional[str] = None
    type: Optional[str] = None
    reason_code: Optional[str] = None
    created_at: Optional[str] = None
    completed_at: Optional[str] = None
    state: Optional[ExchangeState] = None


class ForeignExchangeClient:
    def __init__(self, client: "BusinessClient") -> None:
        self._client = client

    async def rate(self, params: ExchangeRateParams) -> ExchangeRate:
        return await self._client.request(
            Get(),
            self._client.environment.uri("1.0", f"/rate{params.to_query()}"),
            ExchangeRate,
        )

    async def exchange(self, exchange: ExchangeRequest) -> Exchange:
        return await self._client.request(
            Post(Json(exchange)), self._client.environment.uri("1.0", "/exchange"), Exchange
        )
