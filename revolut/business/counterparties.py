"""Business counterparties API.

Only available in the production environment; the sandbox offers a limited
subset that this client does not expose.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from pydantic import Field

from ..client import require_environment
from ..environment import EnvironmentKind
from ..http import Delete, Get, Json, Post, query_string
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = [
    "CounterpartyListParams",
    "CounterpartyProfileType",
    "IndividualName",
    "CounterpartyAddress",
    "CounterpartyRequest",
    "CounterpartyState",
    "CounterpartyAccountType",
    "CounterpartyAccount",
    "CounterpartyCardScheme",
    "CounterpartyCard",
    "Counterparty",
    "AccountNameRequest",
    "AccountNameReasonType",
    "AccountNameReason",
    "AccountName",
    "CounterpartiesClient",
]


class CounterpartyListParams(ApiModel):
    name: Optional[str] = None
    account_no: Optional[str] = None
    sort_code: Optional[str] = None
    iban: Optional[str] = None
    bic: Optional[str] = None
    created_before: Optional[str] = None
    limit: Optional[int] = None

    def to_query(self) -> str:
        return query_string(
            (key, getattr(self, key))
            for key in ("name", "account_no", "sort_code", "iban", "bic", "created_before", "limit")
        )

    def __str__(self) -> str:
        return self.to_query()


class CounterpartyProfileType(ApiEnum):
    PERSONAL = "personal"
    BUSINESS = "business"


class IndividualName(ApiModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class CounterpartyAddress(ApiModel):
    street_line1: Optional[str] = None
    street_line2: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    country: str
    postcode: str


class CounterpartyRequest(ApiModel):
    company_name: Optional[str] = None
    profile_type: Optional[CounterpartyProfileType] = None
    name: Optional[str] = None
    individual_name: Optional[IndividualName] = None
    bank_country: Optional[str] = None
    currency: Optional[str] = None
    revtag: Optional[str] = None
    account_no: Optional[str] = None
    iban: Optional[str] = None
    sort_code: Optional[str] = None
    routing_number: Optional[str] = None
    bic: Optional[str] = None
    clabe: Optional[str] = None
    ifsc: Optional[str] = None
    bsb_code: Optional[str] = None
    address: Optional[CounterpartyAddress] = None


class CounterpartyState(ApiEnum):
    CREATED = "created"
    DRAFT = "draft"
    DELETED = "deleted"


class CounterpartyAccountType(ApiEnum):
    REVOLUT = "revolut"
    EXTERNAL = "external"


class CounterpartyAccount(ApiModel):
    id: str
    name: Optional[str] = None
    bank_country: Optional[str] = None
    currency: str
    type: CounterpartyAccountType
    account_no: Optional[str] = None
    iban: Optional[str] = None
    sort_code: Optional[str] = None
    routing_number: Optional[str] = None
    bic: Optional[str] = None
    clabe: Optional[str] = None
    ifsc: Optional[str] = None
    bsb_code: Optional[str] = None


class CounterpartyCardScheme(ApiEnum):
    VISA = "visa"
    MASTERCARD = "mastercard"


class CounterpartyCard(ApiModel):
    id: str
    name: str
    last_digits: str
    scheme: CounterpartyCardScheme
    country: str
    currency: str


class Counterparty(ApiModel):
    id: str
    name: str
    revtag: Optional[str] = None
    profile_type: Optional[str] = None
    country: Optional[str] = None
    state: CounterpartyState
    created_at: str
    updated_at: str
    accounts: List[CounterpartyAccount] = Field(default_factory=list)
    cards: List[CounterpartyCard] = Field(default_factory=list)


class AccountNameRequest(ApiModel):
    account_no: str
    sort_code: str
    company_name: Optional[str] = None
    individual_name: Optional[IndividualName] = None


class AccountNameReasonType(ApiEnum):
    CLOSE_MATCH = "close_match"
    INDIVIDUAL_ACCOUNT_NAME_MATCHED = "individual_account_name_matched"
    COMPANY_ACCOUNT_NAME_MATCHED = "company_account_name_matched"
    INDIVIDUAL_ACCOUNT_CLOSE_MATCH = "individual_account_close_match"
    COMPANY_ACCOUNT_CLOSE_MATCH = "company_account_close_match"
    NOT_MATCHED = "not_matched"
    ACCOUNT_DOES_NOT_EXIST = "account_does_not_exist"
    ACCOUNT_SWITCHED = "account_switched"
    CANNOT_BE_CHECKED = "cannot_be_checked"


class AccountNameReason(ApiModel):
    type: Optional[AccountNameReasonType] = None
    code: Optional[str] = None


class AccountName(ApiModel):
    """Confirmation of Payee answer for a UK account."""

    result_code: str
    reason: Optional[AccountNameReason] = None
    company_name: Optional[str] = None
    individual_name: Optional[IndividualName] = None


class CounterpartiesClient:
    def __init__(self, client: "BusinessClient") -> None:
        require_environment(client, EnvironmentKind.PRODUCTION, "counterparties")
        self._client = client

    async def list(self, params: Optional[CounterpartyListParams] = None) -> List[Counterparty]:
        query = (params or CounterpartyListParams()).to_query()
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", f"/counterparties{query}"), List[Counterparty]
        )

    async def retrieve(self, counterparty_id: str) -> Counterparty:
        return await self._client.request(
            Get(),
            self._client.environment.uri("1.0", f"/counterparty/{counterparty_id}"),
            Counterparty,
        )

    async def create(self, counterparty: CounterpartyRequest) -> Counterparty:
        return await self._client.request(
            Post(Json(counterparty)), self._client.environment.uri("1.0", "/counterparty"), Counterparty
        )

    async def delete(self, counterparty_id: str) -> None:
        await self._client.request(
            Delete(), self._client.environment.uri("1.0", f"/counterparty/{counterparty_id}")
        )

    async def validate_account_name(self, account_name: AccountNameRequest) -> AccountName:
        return await self._client.request(
            Post(Json(account_name)),
            self._client.environment.uri("1.0", "/account-name-validation"),
            AccountName,
        )
