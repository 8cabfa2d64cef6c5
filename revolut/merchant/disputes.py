"""Merchant disputes API (unversioned endpoints).

Only available in the production environment.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ..client import require_environment
from ..environment import EnvironmentKind
from ..http import Get, Json, Multipart, Part, Post
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import MerchantClient

__all__ = [
    "DisputeState",
    "DisputeSubstate",
    "PaymentMethodType",
    "DisputePaymentMethod",
    "DisputePayment",
    "Dispute",
    "Evidence",
    "EvidenceType",
    "EvidenceRequest",
    "ChallengeDisputeRequest",
    "DisputesClient",
]


class DisputeState(ApiEnum):
    NEEDS_RESPONSE = "needs_response"
    UNDER_REVIEW = "under_review"
    WON = "won"
    LOST = "lost"


class DisputeSubstate(ApiEnum):
    ARBITRATION = "arbitration"
    LOST_ACCEPTED = "lost_accepted"
    LOST_ARBITRATION = "lost_arbitration"
    LOST_EXPIRED = "lost_expired"
    LOST_PRE_ARBITRATION = "lost_pre_arbitration"
    NEW = "new"
    PRE_ARBITRATION = "pre_arbitration"
    REPRESENTMENT = "representment"
    WON_ARBITRATION = "won_arbitration"
    WON_PRE_ARBITRATION = "won_pre_arbitration"
    WON_REPRESENTMENT = "won_representment"
    WON_REVERSAL = "won_reversal"


class PaymentMethodType(ApiEnum):
    APPLE_PAY = "apple_pay"
    APPLE_TAP_TO_PAY = "apple_tap_to_pay"
    CARD = "card"
    GOOGLE_PAY = "google_pay"
    REVOLUT_PAY_ACCOUNT = "revolut_pay_account"
    REVOLUT_PAY_CARD = "revolut_pay_card"


class DisputePaymentMethod(ApiModel):
    type: Optional[PaymentMethodType] = None
    card_brand: Optional[str] = None
    card_last_four: Optional[str] = None


class DisputePayment(ApiModel):
    id: Optional[str] = None
    order_id: Optional[str] = None
    created_at: Optional[str] = None
    arn: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    payment_method: Optional[DisputePaymentMethod] = None


class Dispute(ApiModel):
    id: Optional[str] = None
    state: Optional[DisputeState] = None
    substate: Optional[DisputeSubstate] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    response_due_date: Optional[str] = None
    reason_code: Optional[str] = None
    reason_description: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    payment: Optional[DisputePayment] = None


class Evidence(ApiModel):
    id: str


class EvidenceType(ApiEnum):
    PDF = "application/pdf"
    PNG = "image/png"
    JPEG = "image/jpeg"


@dataclass(frozen=True)
class EvidenceRequest:
    file_name: str
    content_type: EvidenceType
    data: bytes

    def to_part(self) -> Part:
        return Part(contents=self.data, mime_type=self.content_type.value, file_name=self.file_name)


class ChallengeDisputeRequest(ApiModel):
    reason: str
    comment: Optional[str] = None
    evidences: List[str]


class DisputesClient:
    def __init__(self, client: "MerchantClient") -> None:
        require_environment(client, EnvironmentKind.PRODUCTION, "disputes")
        self._client = client

    async def list(self) -> List[Dispute]:
        return await self._client.request(
            Get(), self._client.environment.unversioned_uri("/disputes"), List[Dispute]
        )

    async def retrieve(self, dispute_id: str) -> Dispute:
        return await self._client.request(
            Get(), self._client.environment.unversioned_uri(f"/disputes/{dispute_id}"), Dispute
        )

    async def accept(self, dispute_id: str) -> None:
        await self._client.request(
            Post(), self._client.environment.unversioned_uri(f"/disputes/{dispute_id}/accept")
        )

    async def upload_evidence(self, dispute_id: str, evidence: EvidenceRequest) -> Evidence:
        return await self._client.request(
            Post(Multipart([evidence.to_part()])),
            self._client.environment.unversioned_uri(f"/disputes/{dispute_id}/evidences"),
            Evidence,
        )

    async def challenge(self, dispute_id: str, challenge: ChallengeDisputeRequest) -> None:
        await self._client.request(
            Post(Json(challenge)),
            self._client.environment.unversioned_uri(f"/disputes/{dispute_id}/challenge"),
        )
