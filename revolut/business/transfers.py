"""Business transfers API.

Available in sandbox and production environments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..http import Get, Json, Post
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = [
    "TransferState",
    "TransferReceiver",
    "TransferReason",
    "ExchangeReason",
    "TransferRequest",
    "Transfer",
    "PayRequest",
    "Payment",
    "TransfersClient",
]


class TransferState(ApiEnum):
    CREATED = "created"
    PENDING = "pending"
    COMPLETED = "completed"
    DECLINED = "declined"
    FAILED = "failed"
    REVERTED = "reverted"


class TransferReceiver(ApiModel):
    counterparty_id: str
    account_id: Optional[str] = None
    card_id: Optional[str] = None


class TransferReason(ApiModel):
    country: str
    currency: str
    code: str
    description: str


class ExchangeReason(ApiModel):
    code: str
    name: str


class TransferRequest(ApiModel):
    """Move money between two accounts of the same business."""

    request_id: str
    source_account_id: str
    target_account_id: str
    amount: float
    currency: str
    reference: Optional[str] = None


class Transfer(ApiModel):
    id: str
    state: TransferState
    created_at: str
    completed_at: Optional[str] = None


class PayRequest(ApiModel):
    """Pay a counterparty from one of the business accounts."""

    request_id: str
    account_id: str
    receiver: TransferReceiver
    amount: float
    currency: Optional[str] = None
    reference: Optional[str] = None
    charge_bearer: Optional[str] = None
    transfer_reason_code: Optional[str] = None
    exchange_reason_code: Optional[str] = None


class Payment(ApiModel):
    id: str
    state: TransferState
    created_at: str
    completed_at: Optional[str] = None


class TransfersClient:
    def __init__(self, client: "BusinessClient") -> None:
        self._client = client

    async def transfer_reasons(self) -> List[TransferReason]:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", "/transfer-reasons"), List[TransferReason]
        )

    async def exchange_reasons(self) -> List[ExchangeReason]:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", "/exchange-reasons"), List[ExchangeReason]
        )

    async def transfer(self, transfer: TransferRequest) -> Transfer:
        return await self._client.request(
            Post(Json(transfer)), self._client.environment.uri("1.0", "/transfer"), Transfer
        )

    async def pay(self, payment: PayRequest) -> Payment:
        return await self._client.request(
            Post(Json(payment)), self._client.environment.uri("1.0", "/pay"), Payment
        )
