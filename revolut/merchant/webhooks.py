"""Merchant webhooks API.

Available in sandbox and production environments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..environment import Endpoint
from ..http import Delete, Get, Json, Post, Put
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import MerchantClient

__all__ = [
    "WebhookEvent",
    "WebhookRequest",
    "Webhook",
    "RotateWebhookSigningSecretRequest",
    "WebhooksClient",
]


class WebhookEvent(ApiEnum):
    ORDER_COMPLETED = "ORDER_COMPLETED"
    ORDER_AUTHORISED = "ORDER_AUTHORISED"
    ORDER_CANCELLED = "ORDER_CANCELLED"
    ORDER_PAYMENT_AUTHENTICATED = "ORDER_PAYMENT_AUTHENTICATED"
    ORDER_PAYMENT_DECLINED = "ORDER_PAYMENT_DECLINED"
    ORDER_PAYMENT_FAILED = "ORDER_PAYMENT_FAILED"
    PAYOUT_INITIATED = "PAYOUT_INITIATED"
    PAYOUT_COMPLETED = "PAYOUT_COMPLETED"
    PAYOUT_FAILED = "PAYOUT_FAILED"
    DISPUTE_ACTION_REQUIRED = "DISPUTE_ACTION_REQUIRED"
    DISPUTE_UNDER_REVIEW = "DISPUTE_UNDER_REVIEW"
    DISPUTE_WON = "DISPUTE_WON"
    DISPUTE_LOST = "DISPUTE_LOST"


class WebhookRequest(ApiModel):
    url: str
    events: List[WebhookEvent]


class Webhook(ApiModel):
    id: str
    url: Optional[str] = None
    events: Optional[List[WebhookEvent]] = None
    signing_secret: str


class RotateWebhookSigningSecretRequest(ApiModel):
    expiration_period: Optional[str] = None


class WebhooksClient:
    def __init__(self, client: "MerchantClient") -> None:
        self._client = client

    def _uri(self, path: str) -> Endpoint:
        return self._client.environment.uri("1.0", path)

    async def create(self, webhook: WebhookRequest) -> Webhook:
        return await self._client.request(Post(Json(webhook)), self._uri("/webhooks"), Webhook)

    async def list(self) -> List[Webhook]:
        return await self._client.request(Get(), self._uri("/webhooks"), List[Webhook])

    async def retrieve(self, webhook_id: str) -> Webhook:
        return await self._client.request(Get(), self._uri(f"/webhooks/{webhook_id}"), Webhook)

    async def update(self, webhook_id: str, webhook: WebhookRequest) -> Webhook:
        return await self._client.request(
            Put(Json(webhook)), self._uri(f"/webhooks/{webhook_id}"), Webhook
        )

    async def delete(self, webhook_id: str) -> None:
        await self._client.request(Delete(), self._uri(f"/webhooks/{webhook_id}"))

    async def rotate_signing_secret(
        self, webhook_id: str, rotation: Optional[RotateWebhookSigningSecretRequest] = None
    ) -> Webhook:
        return await self._client.request(
            Post(Json(rotation or RotateWebhookSigningSecretRequest())),
            self._uri(f"/webhooks/{webhook_id}/rotate-signing-secret"),
            Webhook,
        )
