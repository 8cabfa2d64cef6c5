"""Business expenses API.

Only available in the production environment.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from ..client import require_environment
from ..environment import EnvironmentKind
from ..http import Get
from ..models import ApiModel

if TYPE_CHECKING:
    from .client import BusinessClient

__all__ = ["Amount", "Category", "TaxRate", "ExpenseSplit", "ExpenseSpentAmount", "Expense", "ExpensesClient"]


class Amount(ApiModel):
    amount: Optional[float] = None
    currency: Optional[str] = None


class Category(ApiModel):
    name: str
    code: Optional[str] = None


class TaxRate(ApiModel):
    name: str
    percentage: float


class ExpenseSplit(ApiModel):
    amount: Amount
    category: Category
    tax_rate: TaxRate


class ExpenseSpentAmount(ApiModel):
    amount: float
    currency: str


class Expense(ApiModel):
    id: str
    state: str
    transaction_type: str
    description: Optional[str] = None
    submitted_at: Optional[str] = None
    completed_at: Optional[str] = None
    payer: Optional[str] = None
    merchant: Optional[str] = None
    transaction_id: Optional[str] = None
    expense_date: str
    labels: Dict[str, List[str]]
    splits: List[ExpenseSplit]
    receipt_ids: List[str]
    spent_amount: ExpenseSpentAmount


class ExpensesClient:
    def __init__(self, client: "BusinessClient") -> None:
        require_environment(client, EnvironmentKind.PRODUCTION, "expenses")
        self._client = client

    async def list(self) -> List[Expense]:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", "/expenses"), List[Expense]
        )

    async def retrieve(self, expense_id: str) -> Expense:
        return await self._client.request(
            Get(), self._client.environment.uri("1.0", f"/expenses/{expense_id}"), Expense
        )

    async def receipt(self, expense_id: str, receipt_id: str) -> bytes:
        """Download the receipt file as raw bytes."""
        return await self._client.request_raw(
            Get(),
            self._client.environment.uri(
                "1.0", f"/expenses/{expense_id}/receipts/{receipt_id}/content"
            ),
        )
