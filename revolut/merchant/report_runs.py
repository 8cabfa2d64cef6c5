"""Merchant report runs API (unversioned endpoints)."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field

from ..http import Get, Json, Post
from ..models import ApiEnum, ApiModel

if TYPE_CHECKING:
    from .client import MerchantClient

__all__ = [
    "ReportType",
    "ReportFilter",
    "ReportOptions",
    "ReportRunRequest",
    "ReportRunStatus",
    "ReportRun",
    "ReportRunsClient",
]


class ReportType(ApiEnum):
    SETTLEMENT_REPORT = "settlement_report"
    CUSTOM_REPORT = "custom_report"
    PAYOUT_STATEMENT_REPORT = "payout_statement_report"
    ICPP_FEE_BREAKDOWN_REPORT = "icpp_fee_breakdown_report"


class ReportFilter(ApiModel):
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    entity_types: Optional[str] = None
    entity_states: Optional[str] = None
    currency: Optional[str] = None
    location_id: Optional[str] = None
    payout_id: Optional[str] = None


class ReportOptions(ApiModel):
    timezone: Optional[str] = None
    columns: Optional[str] = None


class ReportRunRequest(ApiModel):
    type: ReportType
    format: str = "csv"
    filter: Optional[ReportFilter] = None
    options: Optional[ReportOptions] = None


class ReportRunStatus(ApiEnum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    EXPIRED = "expired"


class ReportRun(ApiModel):
    report_run_id: str
    status: ReportRunStatus
    file_url: Optional[str] = None


class ReportRunsClient:
    def __init__(self, client: "MerchantClient") -> None:
        self._client = client

    async def create(self, report: ReportRunRequest) -> ReportRun:
        return await self._client.request(
            Post(Json(report)), self._client.environment.unversioned_uri("/report-runs"), ReportRun
        )

    async def retrieve(self, report_run_id: str) -> ReportRun:
        return await self._client.request(
            Get(),
            self._client.environment.unversioned_uri(f"/report-runs/{report_run_id}"),
            ReportRun,
        )

    async def download(self, report_run_id: str) -> bytes:
        """Fetch the generated report file."""
        return await self._client.request_raw(
            Get(), self._client.environment.unversioned_uri(f"/report-runs/{report_run_id}/file")
        )
