"""Business simulations API.

Only available in the sandbox environment.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..client import require_environment
from ..environment import EnvironmentKind
from ..http import Json, Post
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = [
    "TransferStateRequest",
    "TransferState",
    "TransferStateUpdate",
    "TopUpState",
    "TopUpRequest",
    "TopUp",
    "SimulationsClient",
]


class TransferStateRequest(ApiEnum):
    COMPLETE = "complete"
    REVERT = "revert"
    DECLINE = "decline"
    FAIL = "fail"


class TransferState(ApiEnum):
    COMPLETED = "completed"
    REVERTED = "reverted"
    DECLINED = "declined"
    FAILED = "failed"


class TransferStateUpdate(ApiModel):
    id: str
    state: TransferState
    created_at: str
    completed_at: Optional[str] = None


class TopUpState(ApiEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    REVERTED = "reverted"
    FAILED = "failed"


class TopUpRequest(ApiModel):
    account_id: str
    amount: float
    currency: str
    reference: Optional[str] = None
    state: Optional[TopUpState] = None


class TopUp(ApiModel):
    id: str
    state: TopUpState
    created_at: str
    completed_at: Optional[str] = None


class SimulationsClient:
    def __init__(self, client: "BusinessClient") -> None:
        require_environment(client, EnvironmentKind.SANDBOX, "simulations")
        self._client = client

    async def update_transfer_state(
        self, transfer_id: str, action: TransferStateRequest
    ) -> TransferStateUpdate:
        return await self._client.request(
            Post(),
            self._client.environment.uri(
                "1.0", f"/sandbox/transactions/{transfer_id}/{action.value}"
            ),
            TransferStateUpdate,
        )

    async def topup(self, top_up: TopUpRequest) -> TopUp:
        return await self._client.request(
            Post(Json(top_up)), self._client.environment.uri("1.0", "/sandbox/topup"), TopUp
        )
