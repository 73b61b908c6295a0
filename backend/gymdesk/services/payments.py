"""Business logic for payment operations."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import models, schemas
from .lookups import (
    ConstraintViolationError,
    InvalidStateError,
    describe_integrity_error,
    require_entity,
)


class PaymentService:
    """Operations for reading and recording member payments."""

    @staticmethod
    def list_payments(
        db: Session,
        *,
        member_id: Optional[int] = None,
        status: Optional[models.PaymentStatus] = None,
        payment_method: Optional[models.PaymentMethod] = None,
    ) -> Iterable[models.Payment]:
        query = db.query(models.Payment)

        if member_id is not None:
            query = query.filter(models.Payment.member_id == member_id)
        if status is not None:
            query = query.filter(models.Payment.status == status)
        if payment_method is not None:
            query = query.filter(models.Payment.payment_method == payment_method)

        return query.order_by(
            models.Payment.payment_date.desc(),
            models.Payment.id.desc(),
        ).all()

    @staticmethod
    def get_payment(db: Session, payment_id: int) -> models.Payment:
        return require_entity(db, models.Payment, payment_id, "Payment")

    @staticmethod
    def _normalize_amount(value: Decimal | float | str) -> Decimal:
        cents = Decimal("0.01")
        return Decimal(str(value)).quantize(cents, rounding=ROUND_HALF_UP)

    @staticmethod
    def _resolve_membership(
        db: Session, member_id: int, membership_id: Optional[int]
    ) -> Optional[models.Membership]:
        if membership_id is None:
            return None
        membership = require_entity(db, models.Membership, membership_id, "Membership")
        if membership.member_id != member_id:
            raise InvalidStateError(
                f"Membership {membership_id} does not belong to member {member_id}"
            )
        return membership

    @classmethod
    def create_payment(cls, db: Session, data: schemas.PaymentCreate) -> models.Payment:
        require_entity(db, models.Member, data.member_id, "Member")
        cls._resolve_membership(db, data.member_id, data.membership_id)

        payment = models.Payment(
            member_id=data.member_id,
            membership_id=data.membership_id,
            amount=cls._normalize_amount(data.amount),
            payment_method=data.payment_method,
            payment_date=data.payment_date or date.today(),
            description=data.description,
            status=data.status,
        )
        db.add(payment)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConstraintViolationError(describe_integrity_error(exc)) from exc
        db.refresh(payment)
        return payment
