"""Business accounts API.

Available in sandbox and production environments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..errors import RequestError
from ..http import Get
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = ["AccountState", "Account", "AccountAddress", "AccountEstimatedTime", "BankDetails", "AccountsClient"]


class AccountState(ApiEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Account(ApiModel):
    id: str
    name: Optional[str] = None
    balance: float
    currency: str
    state: AccountState
    public: bool
    created_at: str
    updated_at: str


class AccountEstimatedTime(ApiModel):
    unit: str
    min: Optional[int] = None
    max: Optional[int] = None


class AccountAddress(ApiModel):
    street_line1: Optional[str] = None
    street_line2: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    country: str
    postcode: str


class BankDetails(ApiModel):
    iban: Optional[str] = None
    bic: Optional[str] = None
    account_no: Optional[str] = None
    sort_code: Optional[str] = None
    routing_number: Optional[str] = None
    beneficiary: str
    beneficiary_address: AccountAddress
    bank_country: Optional[str] = None
    pooled: Optional[bool] = None
    unique_reference: Optional[str] = None
    schemes: List[str]
    estimated_time: AccountEstimatedTime


class AccountsClient:
    def __init__(self, client: "BusinessClient") -> None:
        self._client = client

    async def list(self) -> List[Account]:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", "/accounts"), List[Account]
        )

    async def retrieve(self, account_id: str) -> Account:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", f"/accounts/{account_id}"), Account
        )

    async def bank_details(self, account_id: str) -> BankDetails:
        """Return the first set of bank details of *account_id*."""
        details: List[BankDetails] = await self._client.request(
            Get(),
            self._client.environment.uri("1.0", f"/accounts/{account_id}/bank-details"),
            List[BankDetails],
        )
        if not details:
            raise RequestError("No such account present")
        return details[0]
