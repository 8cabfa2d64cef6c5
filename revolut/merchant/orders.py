"""Merchant orders API.

Available in sandbox and production environments. Order creation and
manipulation use the unversioned endpoints, listing uses ``/1.0/orders``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from ..http import Get, Json, Post
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import MerchantClient

__all__ = ["OrderType", "OrderState", "Customer", "OrderRequest", "Order", "OrdersClient"]


class OrderType(ApiEnum):
    PAYMENT = "payment"
    PAYMENT_REQUEST = "payment_request"
    REFUND = "refund"
    CHARGEBACK = "chargeback"
    CHARGEBACK_REVERSAL = "chargeback_reversal"
    CREDIT_REIMBURSEMENT = "credit_reimbursement"


class OrderState(ApiEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    AUTHORISED = "authorised"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class Customer(ApiModel):
    id: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    date_of_birth: Optional[str] = None


class OrderRequest(ApiModel):
    amount: int
    currency: str
    settlement_currency: Optional[str] = None
    description: Optional[str] = None
    customer: Optional[Customer] = None
    enforce_challenge: Optional[str] = None
    capture_mode: Optional[str] = None
    cancel_authorised_after: Optional[str] = None
    location_id: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    redirect_url: Optional[str] = None
    statement_descriptor_suffix: Optional[str] = None


class Order(ApiModel):
    id: str
    token: Optional[str] = None
    type: Optional[OrderType] = None
    state: Optional[OrderState] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    description: Optional[str] = None
    capture_mode: Optional[str] = None
    cancel_authorised_after: Optional[str] = None
    amount: Optional[int] = None
    outstanding_amount: Optional[int] = None
    refunded_amount: Optional[int] = None
    currency: Optional[str] = None
    settlement_currency: Optional[str] = None
    customer: Optional[Customer] = None
    location_id: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    checkout_url: Optional[str] = None
    redirect_url: Optional[str] = None


class _CaptureRequest(ApiModel):
    amount: int


class OrdersClient:
    def __init__(self, client: "MerchantClient") -> None:
        self._client = client

    async def create(self, order: OrderRequest) -> Order:
        return await self._client.request(
            Post(Json(order)), self._client.environment.unversioned_uri("/orders"), Order
        )

    async def retrieve(self, order_id: str) -> Order:
        return await self._client.request(
            Get(), self._client.environment.unversioned_uri(f"/orders/{order_id}"), Order
        )

    async def list(self) -> List[Order]:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", "/orders"), List[Order]
        )

    async def capture(self, order_id: str, amount: int) -> Order:
        return await self._client.request(
            Post(Json(_CaptureRequest(amount=amount))),
            self._client.environment.unversioned_uri(f"/orders/{order_id}/capture"),
            Order,
        )

    async def cancel(self, order_id: str) -> Order:
        return await self._client.request(
            Post(), self._client.environment.unversioned_uri(f"/orders/{order_id}/cancel"), Order
        )
