"""Router exposing trainer operations."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import GymServiceError, TrainerService
from .errors import http_error

LOGGER = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.TrainerRead])
def list_trainers(db: Session = Depends(get_db)) -> List[schemas.TrainerRead]:
    return list(TrainerService.list_trainers(db))


@router.post("", response_model=schemas.TrainerRead, status_code=status.HTTP_201_CREATED)
def create_trainer(
    trainer_in: schemas.TrainerCreate, db: Session = Depends(get_db)
) -> schemas.TrainerRead:
    try:
        trainer = TrainerService.create_trainer(db, trainer_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info("Trainer created", extra={"trainer_id": trainer.id})
    return trainer


@router.get("/{trainer_id}", response_model=schemas.TrainerRead)
def get_trainer(trainer_id: int, db: Session = Depends(get_db)) -> schemas.TrainerRead:
    try:
        return TrainerService.get_trainer(db, trainer_id)
    except GymServiceError as exc:
        raise http_error(exc) from exc


@router.put("/{trainer_id}", response_model=schemas.TrainerRead)
def update_trainer(
    trainer_id: int,
    trainer_in: schemas.TrainerUpdate,
    db: Session = Depends(get_db),
) -> schemas.TrainerRead:
    try:
        trainer = TrainerService.update_trainer(db, trainer_id, trainer_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info("Trainer updated", extra={"trainer_id": trainer.id})
    return trainer
