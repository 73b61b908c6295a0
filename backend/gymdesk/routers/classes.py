"""Routers exposing class scheduling and attendance operations."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import AttendanceService, ClassService, GymServiceError
from .errors import http_error

LOGGER = logging.getLogger(__name__)

router = APIRouter()
attendance_router = APIRouter()


@router.get("", response_model=List[schemas.GymClassRead])
def list_classes(db: Session = Depends(get_db)) -> List[schemas.GymClassRead]:
    """Return every class ordered by date and start time."""
    return list(ClassService.list_classes(db))


@router.post("", response_model=schemas.GymClassRead, status_code=status.HTTP_201_CREATED)
def create_class(
    class_in: schemas.GymClassCreate, db: Session = Depends(get_db)
) -> schemas.GymClassRead:
    try:
        gym_class = ClassService.create_class(db, class_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info(
        "Class created",
        extra={"class_id": gym_class.id, "trainer_id": gym_class.trainer_id},
    )
    return gym_class


@router.get("/{class_id}", response_model=schemas.GymClassRead)
def get_class(class_id: int, db: Session = Depends(get_db)) -> schemas.GymClassRead:
    try:
        return ClassService.get_class(db, class_id)
    except GymServiceError as exc:
        raise http_error(exc) from exc


@router.put("/{class_id}", response_model=schemas.GymClassRead)
def update_class(
    class_id: int,
    class_in: schemas.GymClassUpdate,
    db: Session = Depends(get_db),
) -> schemas.GymClassRead:
    try:
        gym_class = ClassService.update_class(db, class_id, class_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info("Class updated", extra={"class_id": gym_class.id})
    return gym_class


@router.get("/{class_id}/attendance", response_model=List[schemas.ClassAttendanceRead])
def list_class_attendance(
    class_id: int, db: Session = Depends(get_db)
) -> List[schemas.ClassAttendanceRead]:
    try:
        return list(AttendanceService.list_for_class(db, class_id))
    except GymServiceError as exc:
        raise http_error(exc) from exc


@attendance_router.post(
    "", response_model=schemas.ClassAttendanceRead, status_code=status.HTTP_201_CREATED
)
def create_attendance(
    attendance_in: schemas.ClassAttendanceCreate, db: Session = Depends(get_db)
) -> schemas.ClassAttendanceRead:
    try:
        attendance = AttendanceService.create_attendance(db, attendance_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info(
        "Attendance recorded",
        extra={
            "attendance_id": attendance.id,
            "class_id": attendance.class_id,
            "member_id": attendance.member_id,
        },
    )
    return attendance


@attendance_router.get("/{attendance_id}", response_model=schemas.ClassAttendanceRead)
def get_attendance(
    attendance_id: int, db: Session = Depends(get_db)
) -> schemas.ClassAttendanceRead:
    try:
        return AttendanceService.get_attendance(db, attendance_id)
    except GymServiceError as exc:
        raise http_error(exc) from exc


@attendance_router.put("/{attendance_id}", response_model=schemas.ClassAttendanceRead)
def update_attendance(
    attendance_id: int,
    attendance_in: schemas.ClassAttendanceUpdate,
    db: Session = Depends(get_db),
) -> schemas.ClassAttendanceRead:
    try:
        return AttendanceService.update_attendance(db, attendance_id, attendance_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
