"""Payment endpoints: create, list with filters, stats, and lookup by id."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from paytrack.api.v1.auth import get_app_settings, require_reader
from paytrack.core.config import Settings
from paytrack.core.database import get_db
from paytrack.core.security import TokenClaims
from paytrack.schemas.common import ErrorResponse
from paytrack.schemas.payments import (
    PaymentCreateRequest,
    PaymentCreateResponse,
    PaymentOut,
    PaymentsListResponse,
    PaymentStatsResponse,
)
from paytrack.services.payments import (
    compute_stats,
    create_payment,
    get_payment,
    list_payments,
    parse_positive_int,
)

router = APIRouter()


@router.get("", response_model=PaymentsListResponse)
def get_payments(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    _reader: Annotated[TokenClaims | None, Depends(require_reader)],
    page: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
    status: Annotated[str | None, Query()] = None,
    method: Annotated[str | None, Query()] = None,
) -> PaymentsListResponse:
    """
    List payments, newest first.

    page and limit are parsed leniently: missing, non-numeric or non-positive
    values fall back to 1 and the default limit; limit is capped.
    """
    page_n = parse_positive_int(page, 1)
    limit_n = min(
        parse_positive_int(limit, settings.PAYMENTS_DEFAULT_PAGE_LIMIT),
        settings.PAYMENTS_MAX_PAGE_LIMIT,
    )
    payments = list_payments(db, page_n, limit_n, status=status, method=method)
    return PaymentsListResponse(
        payments=[PaymentOut.model_validate(p) for p in payments],
        page=page_n,
        limit=limit_n,
    )


@router.post("", response_model=PaymentCreateResponse)
def post_payment(
    body: PaymentCreateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> PaymentCreateResponse:
    """Record a payment. status defaults to pending, method to card, timestamp to now."""
    payment = create_payment(db, body)
    return PaymentCreateResponse(id=payment.id)


@router.get("/stats", response_model=PaymentStatsResponse)
def get_payment_stats(
    db: Annotated[Session, Depends(get_db)],
    _reader: Annotated[TokenClaims | None, Depends(require_reader)],
) -> PaymentStatsResponse:
    """Totals, per-status counts and the last 7 days of successful revenue."""
    return compute_stats(db)


@router.get(
    "/{payment_id}", response_model=PaymentOut, responses={404: {"model": ErrorResponse}}
)
def get_payment_by_id(
    payment_id: str,
    db: Annotated[Session, Depends(get_db)],
    _reader: Annotated[TokenClaims | None, Depends(require_reader)],
) -> PaymentOut:
    return PaymentOut.model_validate(get_payment(db, payment_id))
