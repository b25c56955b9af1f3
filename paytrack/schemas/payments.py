"""Request/response schemas for payment endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from paytrack.schemas.common import CamelModel, ensure_utc

PaymentStatus = Literal["success", "pending", "failed"]


class PaymentCreateRequest(CamelModel):
    """Body for POST /payments. Only amount and receiver are required."""

    amount: float = Field(..., gt=0, description="Positive payment amount")
    receiver: str = Field(..., min_length=1, max_length=255)
    status: PaymentStatus = "pending"
    method: str = Field(default="card", min_length=1, max_length=32)
    reference_id: str | None = Field(default=None, max_length=255)
    timestamp: datetime | None = Field(
        default=None, description="When the payment happened; defaults to now"
    )

    @field_validator("receiver", "method")
    @classmethod
    def strip_non_empty(cls, v: str) -> str:
        s = v.strip()
        if not s:
            raise ValueError("must not be blank")
        return s

    @field_validator("timestamp")
    @classmethod
    def normalize_tz(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else None


class PaymentCreateResponse(CamelModel):
    message: str = "Payment created"
    id: int


class PaymentOut(CamelModel):
    """A stored payment as returned by the API."""

    id: int
    amount: float
    receiver: str
    status: str
    method: str
    reference_id: str | None = None
    timestamp: datetime
    created_at: datetime
    updated_at: datetime

    @field_validator("timestamp", "created_at", "updated_at")
    @classmethod
    def normalize_tz(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class PaymentsListResponse(CamelModel):
    payments: list[PaymentOut]
    page: int
    limit: int


class RevenuePoint(CamelModel):
    date: str = Field(..., description="UTC day, YYYY-MM-DD")
    revenue: float


class PaymentStatsResponse(CamelModel):
    """Aggregate counts and sums for the dashboard."""

    total_payments: int
    total_amount: float
    by_status: dict[str, int]
    total_payments_today: int
    total_payments_this_week: int
    total_revenue: float
    failed_transactions: int
    revenue_chart: list[RevenuePoint]
