"""Router exposing member and member progress operations."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import GymServiceError, MemberService
from .errors import http_error

LOGGER = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.MemberRead])
def list_members(db: Session = Depends(get_db)) -> List[schemas.MemberRead]:
    return list(MemberService.list_members(db))


@router.post("", response_model=schemas.MemberRead, status_code=status.HTTP_201_CREATED)
def create_member(
    member_in: schemas.MemberCreate, db: Session = Depends(get_db)
) -> schemas.MemberRead:
    """Register a new member."""
    try:
        member = MemberService.create_member(db, member_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info("Member created", extra={"member_id": member.id})
    return member


@router.get("/{member_id}", response_model=schemas.MemberRead)
def get_member(member_id: int, db: Session = Depends(get_db)) -> schemas.MemberRead:
    try:
        return MemberService.get_member(db, member_id)
    except GymServiceError as exc:
        raise http_error(exc) from exc


@router.put("/{member_id}", response_model=schemas.MemberRead)
def update_member(
    member_id: int,
    member_in: schemas.MemberUpdate,
    db: Session = Depends(get_db),
) -> schemas.MemberRead:
    try:
        member = MemberService.update_member(db, member_id, member_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info("Member updated", extra={"member_id": member.id})
    return member


@router.get("/{member_id}/progress", response_model=List[schemas.MemberProgressRead])
def list_member_progress(
    member_id: int, db: Session = Depends(get_db)
) -> List[schemas.MemberProgressRead]:
    """Return progress entries for a member, newest measurement first."""
    try:
        return list(MemberService.list_progress(db, member_id))
    except GymServiceError as exc:
        raise http_error(exc) from exc


@router.post(
    "/{member_id}/progress",
    response_model=schemas.MemberProgressRead,
    status_code=status.HTTP_201_CREATED,
)
def record_member_progress(
    member_id: int,
    progress_in: schemas.MemberProgressCreate,
    db: Session = Depends(get_db),
) -> schemas.MemberProgressRead:
    try:
        entry = MemberService.record_progress(db, member_id, progress_in)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info(
        "Member progress recorded",
        extra={"member_id": member_id, "progress_id": entry.id},
    )
    return entry
