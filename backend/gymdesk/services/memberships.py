"""Business logic for membership plans and member subscriptions."""

from __future__ import annotations

from calendar import monthrange
from datetime import date
from typing import Iterable

from sqlalchemy.orm import Session

from .. import models, schemas
from .lookups import InvalidStateError, require_entity


def add_months(start: date, months: int) -> date:
    """Advance ``start`` by whole calendar months.

    The day of month is kept when the target month has it and clamped to the
    target month's last day otherwise (Jan 31 + 1 month -> Feb 28/29).
    """

    if isinstance(months, bool) or not isinstance(months, int) or months <= 0:
        raise ValueError("months must be a positive integer")
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    normalized_month = month_index % 12 + 1
    last_day = monthrange(year, normalized_month)[1]
    return date(year, normalized_month, min(start.day, last_day))


class MembershipService:
    """Operations for the membership plan catalog and member enrolments."""

    @staticmethod
    def list_types(db: Session) -> Iterable[models.MembershipType]:
        return db.query(models.MembershipType).order_by(models.MembershipType.id.asc()).all()

    @staticmethod
    def get_type(db: Session, membership_type_id: int) -> models.MembershipType:
        return require_entity(db, models.MembershipType, membership_type_id, "Membership type")

    @staticmethod
    def create_type(
        db: Session, data: schemas.MembershipTypeCreate
    ) -> models.MembershipType:
        payload = data.model_dump()
        payload["name"] = payload["name"].strip()
        membership_type = models.MembershipType(**payload)
        db.add(membership_type)
        db.commit()
        db.refresh(membership_type)
        return membership_type

    @staticmethod
    def list_memberships(db: Session) -> Iterable[models.Membership]:
        return db.query(models.Membership).order_by(models.Membership.id.asc()).all()

    @staticmethod
    def get_membership(db: Session, membership_id: int) -> models.Membership:
        return require_entity(db, models.Membership, membership_id, "Membership")

    @staticmethod
    def create_membership(
        db: Session, data: schemas.MembershipCreate
    ) -> models.Membership:
        require_entity(db, models.Member, data.member_id, "Member")
        membership_type = require_entity(
            db, models.MembershipType, data.membership_type_id, "Membership type"
        )
        if not membership_type.is_active:
            raise InvalidStateError(
                f"Membership type with id {membership_type.id} is not active"
            )

        start_date = data.start_date or date.today()
        membership = models.Membership(
            member_id=data.member_id,
            membership_type_id=membership_type.id,
            start_date=start_date,
            end_date=add_months(start_date, membership_type.duration_months),
            status=models.MembershipStatus.ACTIVE,
        )
        db.add(membership)
        db.commit()
        db.refresh(membership)
        return membership
