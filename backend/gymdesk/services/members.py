"""Business logic for members and their progress log."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import models, schemas
from .lookups import (
    ConstraintViolationError,
    apply_partial_update,
    describe_integrity_error,
    require_entity,
)

MEMBER_NULLABLE_FIELDS = frozenset(
    {
        "phone",
        "date_of_birth",
        "emergency_contact_name",
        "emergency_contact_phone",
        "medical_conditions",
    }
)


class MemberService:
    """Encapsulates CRUD operations for members."""

    @staticmethod
    def list_members(db: Session) -> Iterable[models.Member]:
        return db.query(models.Member).order_by(models.Member.id.asc()).all()

    @staticmethod
    def get_member(db: Session, member_id: int) -> models.Member:
        return require_entity(db, models.Member, member_id, "Member")

    @staticmethod
    def create_member(db: Session, data: schemas.MemberCreate) -> models.Member:
        member = models.Member(**data.model_dump())
        db.add(member)
        MemberService._commit(db)
        db.refresh(member)
        return member

    @staticmethod
    def update_member(
        db: Session, member_id: int, data: schemas.MemberUpdate
    ) -> models.Member:
        member = require_entity(db, models.Member, member_id, "Member")
        changes = data.model_dump(exclude_unset=True)
        if not apply_partial_update(member, changes, nullable=MEMBER_NULLABLE_FIELDS):
            return member
        db.add(member)
        MemberService._commit(db)
        db.refresh(member)
        return member

    @staticmethod
    def record_progress(
        db: Session, member_id: int, data: schemas.MemberProgressCreate
    ) -> models.MemberProgress:
        require_entity(db, models.Member, member_id, "Member")
        payload = data.model_dump()
        payload["recorded_date"] = payload.get("recorded_date") or date.today()
        entry = models.MemberProgress(member_id=member_id, **payload)
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry

    @staticmethod
    def list_progress(db: Session, member_id: int) -> Iterable[models.MemberProgress]:
        require_entity(db, models.Member, member_id, "Member")
        return (
            db.query(models.MemberProgress)
            .filter(models.MemberProgress.member_id == member_id)
            .order_by(
                models.MemberProgress.recorded_date.desc(),
                models.MemberProgress.id.desc(),
            )
            .all()
        )

    @staticmethod
    def _commit(db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConstraintViolationError(describe_integrity_error(exc)) from exc
