"""Business logic for trainers."""

from __future__ import annotations

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

TRAINER_NULLABLE_FIELDS = frozenset({"phone", "specialization", "hourly_rate"})


class TrainerService:
    """Encapsulates CRUD operations for trainers."""

    @staticmethod
    def list_trainers(db: Session) -> Iterable[models.Trainer]:
        return db.query(models.Trainer).order_by(models.Trainer.id.asc()).all()

    @staticmethod
    def get_trainer(db: Session, trainer_id: int) -> models.Trainer:
        return require_entity(db, models.Trainer, trainer_id, "Trainer")

    @staticmethod
    def create_trainer(db: Session, data: schemas.TrainerCreate) -> models.Trainer:
        trainer = models.Trainer(**data.model_dump())
        db.add(trainer)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConstraintViolationError(describe_integrity_error(exc)) from exc
        db.refresh(trainer)
        return trainer

    @staticmethod
    def update_trainer(
        db: Session, trainer_id: int, data: schemas.TrainerUpdate
    ) -> models.Trainer:
        trainer = require_entity(db, models.Trainer, trainer_id, "Trainer")
        changes = data.model_dump(exclude_unset=True)
        if not apply_partial_update(trainer, changes, nullable=TRAINER_NULLABLE_FIELDS):
            return trainer
        try:
            db.add(trainer)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConstraintViolationError(describe_integrity_error(exc)) from exc
        db.refresh(trainer)
        return trainer
