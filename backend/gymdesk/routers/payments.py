"""Router exposing payment related operations."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models.payment import PaymentMethod, PaymentStatus
from ..services import GymServiceError, PaymentService
from .errors import http_error

LOGGER = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.PaymentRead])
def list_payments(
    member_id: Optional[int] = Query(None, ge=1),
    status_filter: Optional[PaymentStatus] = Query(None, alias="status"),
    payment_method: Optional[PaymentMethod] = Query(None),
    db: Session = Depends(get_db),
) -> List[schemas.PaymentRead]:
    """Return payments, newest first, optionally filtered."""

    try:
        payments = PaymentService.list_payments(
            db,
            member_id=member_id,
            status=status_filter,
            payment_method=payment_method,
        )
    except SQLAlchemyError as exc:
        LOGGER.exception("Failed to list payments")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to load payments. Please try again later.",
        ) from exc
    return list(payments)


@router.post("", response_model=schemas.PaymentRead, status_code=status.HTTP_201_CREATED)
def create_payment(
    payment_in: schemas.PaymentCreate, db: Session = Depends(get_db)
) -> schemas.PaymentRead:
    try:
        payment = PaymentService.create_payment(db, payment_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info(
        "Payment recorded",
        extra={
            "payment_id": payment.id,
            "member_id": payment.member_id,
            "amount": str(payment.amount),
            "payment_method": payment.payment_method.value,
        },
    )
    return payment


@router.get("/{payment_id}", response_model=schemas.PaymentRead)
def get_payment(payment_id: int, db: Session = Depends(get_db)) -> schemas.PaymentRead:
    try:
        return PaymentService.get_payment(db, payment_id)
    except GymServiceError as exc:
        raise http_error(exc) from exc
