"""Business payout links API.

Available in sandbox and production environments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..http import Get, Json, Post, query_string
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = [
    "PayoutLinkState",
    "PayoutMethod",
    "CancellationReason",
    "PayoutLinkListParams",
    "PayoutLink",
    "PayoutLinkRequest",
    "PayoutLinksClient",
]


class PayoutLinkState(ApiEnum):
    CREATED = "created"
    FAILED = "failed"
    AWAITING = "awaiting"
    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    PROCESSING = "processing"
    PROCESSED = "processed"


class PayoutMethod(ApiEnum):
    REVOLUT = "revolut"
    BANK_ACCOUNT = "bank_account"
    CARD = "card"


class CancellationReason(ApiEnum):
    TOO_MANY_NAME_CHECK_ATTEMPTS = "too_many_name_check_attempts"


class PayoutLinkListParams(ApiModel):
    """Filters for listing payout links; unset filters are not sent."""

    state: Optional[List[PayoutLinkState]] = None
    created_before: Optional[str] = None
    limit: Optional[int] = None

    def to_query(self) -> str:
        pairs = [("state", state) for state in self.state or []]
        pairs += [("created_before", self.created_before), ("limit", self.limit)]
        return query_string(pairs)

    def __str__(self) -> str:
        return self.to_query()


class PayoutLink(ApiModel):
    id: str
    state: PayoutLinkState
    created_at: str
    updated_at: str
    counterparty_name: str
    save_counterparty: bool
    request_id: str
    expiry_date: Optional[str] = None
    payout_methods: List[PayoutMethod]
    account_id: str
    amount: float
    currency: str
    url: Optional[str] = None
    reference: str
    transfer_reason_code: Optional[str] = None
    counterparty_id: Optional[str] = None
    transaction_id: Optional[str] = None
    cancellation_reason: Optional[CancellationReason] = None


class PayoutLinkRequest(ApiModel):
    counterparty_name: str
    save_counterparty: Optional[bool] = None
    request_id: str
    account_id: str
    amount: float
    currency: str
    reference: str
    payout_methods: Optional[List[PayoutMethod]] = None
    expiry_period: Optional[str] = None
    transfer_reason_code: Optional[str] = None


class PayoutLinksClient:
    def __init__(self, client: "BusinessClient") -> None:
        self._client = client

    async def list(self, params: Optional[PayoutLinkListParams] = None) -> List[PayoutLink]:
        query = (params or PayoutLinkListParams()).to_query()
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", f"/payout-links{query}"), List[PayoutLink]
        )

    async def retrieve(self, payout_link_id: str) -> PayoutLink:
        return await self._client.request(
            Get(),
            self._client.environment.uri("1.0", f"/payout-links/{payout_link_id}"),
            PayoutLink,
        )

    async def create(self, payout_link: PayoutLinkRequest) -> PayoutLink:
        return await self._client.request(
            Post(Json(payout_link)), self._client.environment.uri("1.0", "/payout-links"), PayoutLink
        )

    async def cancel(self, payout_link_id: str) -> PayoutLink:
        return await self._client.request(
            Post(),
            self._client.environment.uri("1.0", f"/payout-links/{payout_link_id}/cancel"),
            PayoutLink,
        )
