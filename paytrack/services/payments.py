"""Payment persistence: insert, filtered pagination, lookup and dashboard stats."""

import logging
from datetime import UTC, date, datetime, time, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from paytrack.core.errors import NotFoundError
from paytrack.models import Payment
from paytrack.schemas.common import ensure_utc
from paytrack.schemas.payments import (
    PaymentCreateRequest,
    PaymentStatsResponse,
    RevenuePoint,
)

logger = logging.getLogger(__name__)

# Days covered by totalPaymentsThisWeek and revenueChart (today included).
STATS_WINDOW_DAYS = 7

# Largest OFFSET both SQLite and PostgreSQL accept (signed 64-bit).
MAX_OFFSET = 2**63 - 1


def parse_positive_int(value: str | None, default: int) -> int:
    """Lenient query parsing: anything that is not a positive integer yields default."""
    if value is None:
        return default
    try:
        n = int(value)
    except (TypeError, ValueError):
        return default
    return n if n > 0 else default


def create_payment(db: Session, body: PaymentCreateRequest) -> Payment:
    """Insert a payment; status/method/timestamp defaults are already applied by the schema."""
    now = datetime.now(UTC)
    payment = Payment(
        amount=body.amount,
        receiver=body.receiver,
        status=body.status,
        method=body.method,
        reference_id=body.reference_id,
        timestamp=body.timestamp or now,
        created_at=now,
        updated_at=now,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info(
        "Payment created",
        extra={"payment_id": payment.id, "status": payment.status, "method": payment.method},
    )
    return payment


def list_payments(
    db: Session,
    page: int,
    limit: int,
    status: str | None = None,
    method: str | None = None,
) -> list[Payment]:
    """
    Newest first (by timestamp); status and method are exact-match filters.
    A page whose offset does not fit in a database integer is past the end.
    """
    offset = (page - 1) * limit
    if offset > MAX_OFFSET:
        return []
    query = db.query(Payment)
    if status:
        query = query.filter(Payment.status == status)
    if method:
        query = query.filter(Payment.method == method)
    return (
        query.order_by(Payment.timestamp.desc(), Payment.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def get_payment(db: Session, payment_id: str | int) -> Payment:
    try:
        pk = int(payment_id)
    except (TypeError, ValueError):
        raise NotFoundError("Payment not found") from None
    payment = db.get(Payment, pk)
    if payment is None:
        raise NotFoundError("Payment not found")
    return payment


def compute_stats(db: Session, now: datetime | None = None) -> PaymentStatsResponse:
    """
    Aggregate totals for the dashboard.

    Day boundaries are UTC midnights. "This week" is today plus the previous
    six days, and revenue counts successful payments only.
    """
    now = ensure_utc(now or datetime.now(UTC))
    today_start = datetime.combine(now.date(), time.min, tzinfo=UTC)
    window_start = today_start - timedelta(days=STATS_WINDOW_DAYS - 1)

    total_payments = db.query(func.count(Payment.id)).scalar() or 0
    total_amount = db.query(func.sum(Payment.amount)).scalar() or 0.0
    by_status = {
        status: count
        for status, count in db.query(Payment.status, func.count(Payment.id))
        .group_by(Payment.status)
        .all()
    }
    total_revenue = (
        db.query(func.sum(Payment.amount)).filter(Payment.status == "success").scalar()
        or 0.0
    )

    # Window rows are bucketed here rather than with a dialect-specific date function.
    window_rows = (
        db.query(Payment.timestamp, Payment.amount, Payment.status)
        .filter(Payment.timestamp >= window_start)
        .all()
    )
    revenue_by_day: dict[date, float] = {
        (window_start + timedelta(days=i)).date(): 0.0 for i in range(STATS_WINDOW_DAYS)
    }
    today_count = 0
    for ts, amount, status in window_rows:
        ts = ensure_utc(ts)
        if ts >= today_start:
            today_count += 1
        day = ts.date()
        if status == "success" and day in revenue_by_day:
            revenue_by_day[day] += float(amount)

    return PaymentStatsResponse(
        total_payments=total_payments,
        total_amount=float(total_amount),
        by_status=by_status,
        total_payments_today=today_count,
        total_payments_this_week=len(window_rows),
        total_revenue=float(total_revenue),
        failed_transactions=by_status.get("failed", 0),
        revenue_chart=[
            RevenuePoint(date=day.isoformat(), revenue=round(revenue, 2))
            for day, revenue in sorted(revenue_by_day.items())
        ],
    )

