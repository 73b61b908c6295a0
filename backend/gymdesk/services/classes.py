"""Business logic for scheduled classes and class attendance."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import models, schemas
from .lookups import (
    ConflictError,
    apply_partial_update,
    ensure_entities,
    require_entity,
)

CLASS_NULLABLE_FIELDS = frozenset({"description"})
ATTENDANCE_NULLABLE_FIELDS = frozenset({"check_in_time"})


class ClassService:
    """Encapsulates CRUD operations for classes."""

    @staticmethod
    def list_classes(db: Session) -> Iterable[models.GymClass]:
        return (
            db.query(models.GymClass)
            .order_by(models.GymClass.class_date.asc(), models.GymClass.start_time.asc())
            .all()
        )

    @staticmethod
    def get_class(db: Session, class_id: int) -> models.GymClass:
        return require_entity(db, models.GymClass, class_id, "Class")

    @staticmethod
    def create_class(db: Session, data: schemas.GymClassCreate) -> models.GymClass:
        require_entity(db, models.Trainer, data.trainer_id, "Trainer")
        gym_class = models.GymClass(**data.model_dump())
        db.add(gym_class)
        db.commit()
        db.refresh(gym_class)
        return gym_class

    @staticmethod
    def update_class(
        db: Session, class_id: int, data: schemas.GymClassUpdate
    ) -> models.GymClass:
        gym_class = require_entity(db, models.GymClass, class_id, "Class")
        changes = data.model_dump(exclude_unset=True)
        ensure_entities(db, (models.Trainer, changes.get("trainer_id"), "Trainer"))
        if not apply_partial_update(gym_class, changes, nullable=CLASS_NULLABLE_FIELDS):
            return gym_class
        db.add(gym_class)
        db.commit()
        db.refresh(gym_class)
        return gym_class


class AttendanceService:
    """Registers members for classes and tracks check-ins."""

    @staticmethod
    def list_for_class(db: Session, class_id: int) -> Iterable[models.ClassAttendance]:
        require_entity(db, models.GymClass, class_id, "Class")
        return (
            db.query(models.ClassAttendance)
            .filter(models.ClassAttendance.class_id == class_id)
            .order_by(models.ClassAttendance.id.asc())
            .all()
        )

    @staticmethod
    def get_attendance(db: Session, attendance_id: int) -> models.ClassAttendance:
        return require_entity(db, models.ClassAttendance, attendance_id, "Class attendance record")

    @staticmethod
    def _ensure_not_registered(db: Session, class_id: int, member_id: int) -> None:
        exists = (
            db.query(models.ClassAttendance.id)
            .filter(
                models.ClassAttendance.class_id == class_id,
                models.ClassAttendance.member_id == member_id,
            )
            .first()
        )
        if exists:
            raise ConflictError(
                f"Attendance record already exists for member {member_id} in class {class_id}"
            )

    @classmethod
    def create_attendance(
        cls, db: Session, data: schemas.ClassAttendanceCreate
    ) -> models.ClassAttendance:
        ensure_entities(
            db,
            (models.GymClass, data.class_id, "Class"),
            (models.Member, data.member_id, "Member"),
        )
        cls._ensure_not_registered(db, data.class_id, data.member_id)

        attendance = models.ClassAttendance(**data.model_dump())
        db.add(attendance)
        try:
            db.commit()
        except IntegrityError as exc:
            # The unique constraint settles races the pre-check cannot see.
            db.rollback()
            raise ConflictError(
                f"Attendance record already exists for member {data.member_id} "
                f"in class {data.class_id}"
            ) from exc
        db.refresh(attendance)
        return attendance

    @staticmethod
    def update_attendance(
        db: Session, attendance_id: int, data: schemas.ClassAttendanceUpdate
    ) -> models.ClassAttendance:
        attendance = require_entity(
            db, models.ClassAttendance, attendance_id, "Class attendance record"
        )
        changes = data.model_dump(exclude_unset=True)
        if not apply_partial_update(attendance, changes, nullable=ATTENDANCE_NULLABLE_FIELDS):
            return attendance
        db.add(attendance)
        db.commit()
        db.refresh(attendance)
        return attendance
