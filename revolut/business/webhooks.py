"""Business webhooks API (version 2.0).

Available in sandbox and production environments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..environment import Endpoint
from ..http import Delete, Get, Json, Patch, Post, query_string
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = [
    "WebhookEvent",
    "WebhookRequest",
    "WebhookCreationResponse",
    "Webhook",
    "RotateWebhookSigningSecretRequest",
    "FailedWebhookEventsListParams",
    "FailedWebhookEvent",
    "WebhooksClient",
]


class WebhookEvent(ApiEnum):
    TRANSACTION_CREATED = "transaction_created"
    TRANSACTION_STATE_CHANGED = "transaction_state_changed"
    PAYOUT_LINK_CREATED = "payout_link_created"
    PAYOUT_LINK_STATE_CHANGED = "payout_link_state_changed"


class WebhookRequest(ApiModel):
    url: str
    events: Optional[List[WebhookEvent]] = None


class Webhook(ApiModel):
    id: str
    url: str
    events: List[WebhookEvent]


class WebhookCreationResponse(Webhook):
    signing_secret: str


class RotateWebhookSigningSecretRequest(ApiModel):
    # ISO 8601 duration the previous secret stays valid, e.g. "P1D"
    expiration_period: Optional[str] = None


class FailedWebhookEventsListParams(ApiModel):
    limit: Optional[int] = None
    created_before: Optional[str] = None

    def to_query(self) -> str:
        return query_string([("limit", self.limit), ("created_before", self.created_before)])

    def __str__(self) -> str:
        return self.to_query()


class FailedWebhookEvent(ApiModel):
    id: str
    created_at: str
    updated_at: str
    webhook_id: str
    webhook_url: str
    payload: str
    last_sent_date: Optional[str] = None


class WebhooksClient:
    def __init__(self, client: "BusinessClient") -> None:
        self._client = client

    def _uri(self, path: str) -> Endpoint:
        return self._client.environment.uri("2.0", path)

    async def create(self, webhook: WebhookRequest) -> WebhookCreationResponse:
        return await self._client.request(
            Post(Json(webhook)), self._uri("/webhooks"), WebhookCreationResponse
        )

    async def list(self) -> List[Webhook]:
        return await self._client.request(Get(), self._uri("/webhooks"), List[Webhook])

    async def retrieve(self, webhook_id: str) -> Webhook:
        return await self._client.request(Get(), self._uri(f"/webhooks/{webhook_id}"), Webhook)

    async def update(self, webhook_id: str, webhook: WebhookRequest) -> Webhook:
        return await self._client.request(
            Patch(Json(webhook)), self._uri(f"/webhooks/{webhook_id}"), Webhook
        )

    async def delete(self, webhook_id: str) -> None:
        await self._client.request(Delete(), self._uri(f"/webhooks/{webhook_id}"))

    async def rotate_signing_secret(
        self, webhook_id: str, rotation: Optional[RotateWebhookSigningSecretRequest] = None
    ) -> WebhookCreationResponse:
        return await self._client.request(
            Post(Json(rotation or RotateWebhookSigningSecretRequest())),
            self._uri(f"/webhooks/{webhook_id}/rotate-signing-secret"),
            WebhookCreationResponse,
        )

    async def failed_events(
        self, webhook_id: str, params: Optional[FailedWebhookEventsListParams] = None
    ) -> List[FailedWebhookEvent]:
        query = (params or FailedWebhookEventsListParams()).to_query()
        return await self._client.request(
            Get(), self._uri(f"/webhooks/{webhook_id}/failed-events{query}"), List[FailedWebhookEvent]
        )
