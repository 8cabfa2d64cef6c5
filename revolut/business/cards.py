"""Business cards API.

Only available in the production environment.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from pydantic import Field

from ..client import require_environment
from ..environment import EnvironmentKind
from ..http import Get
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = ["CardState", "CardAmount", "CardSpendingLimits", "Card", "CardsClient"]


class CardState(ApiEnum):
    CREATED = "created"
    PENDING = "pending"
    ACTIVE = "active"
    FROZEN = "frozen"
    LOCKED = "locked"


class CardAmount(ApiModel):
    amount: float
    currency: str


class CardSpendingLimits(ApiModel):
    single: Optional[CardAmount] = None
    day: Optional[CardAmount] = None
    week: Optional[CardAmount] = None
    month: Optional[CardAmount] = None
    quarter: Optional[CardAmount] = None
    year: Optional[CardAmount] = None
    all_time: Optional[CardAmount] = None


class Card(ApiModel):
    id: str
    last_digits: str
    expiry: str
    state: CardState
    label: Optional[str] = None
    is_virtual: bool = Field(alias="virtual")
    accounts: List[str]
    categories: Optional[List[str]] = None
    spending_limits: Optional[CardSpendingLimits] = None
    holder_id: Optional[str] = None
    created_at: str
    updated_at: str


class CardsClient:
    def __init__(self, client: "BusinessClient") -> None:
        require_environment(client, EnvironmentKind.PRODUCTION, "cards")
        self._client = client

    async def list(self) -> List[Card]:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", "/cards"), List[Card]
        )
