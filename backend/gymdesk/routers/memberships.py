"""Routers exposing the membership plan catalog and member enrolments."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import GymServiceError, MembershipService
from .errors import http_error

LOGGER = logging.getLogger(__name__)

types_router = APIRouter()
router = APIRouter()


@types_router.get("", response_model=List[schemas.MembershipTypeRead])
def list_membership_types(db: Session = Depends(get_db)) -> List[schemas.MembershipTypeRead]:
    return list(MembershipService.list_types(db))


@types_router.post(
    "", response_model=schemas.MembershipTypeRead, status_code=status.HTTP_201_CREATED
)
def create_membership_type(
    payload: schemas.MembershipTypeCreate, db: Session = Depends(get_db)
) -> schemas.MembershipTypeRead:
    membership_type = MembershipService.create_type(db, payload)
    LOGGER.info("Membership type created", extra={"membership_type_id": membership_type.id})
    return membership_type


@types_router.get("/{membership_type_id}", response_model=schemas.MembershipTypeRead)
def get_membership_type(
    membership_type_id: int, db: Session = Depends(get_db)
) -> schemas.MembershipTypeRead:
    try:
        return MembershipService.get_type(db, membership_type_id)
    except GymServiceError as exc:
        raise http_error(exc) from exc


@router.get("", response_model=List[schemas.MembershipRead])
def list_memberships(db: Session = Depends(get_db)) -> List[schemas.MembershipRead]:
    return list(MembershipService.list_memberships(db))


@router.post("", response_model=schemas.MembershipRead, status_code=status.HTTP_201_CREATED)
def create_membership(
    payload: schemas.MembershipCreate, db: Session = Depends(get_db)
) -> schemas.MembershipRead:
    """Enrol a member; the end date is derived from the plan duration."""
    try:
        membership = MembershipService.create_membership(db, payload)
    except GymServiceError as exc:
        raise http_error(exc) from exc
    LOGGER.info(
        "Membership created",
        extra={
            "membership_id": membership.id,
            "member_id": membership.member_id,
            "end_date": str(membership.end_date),
        },
    )
    return membership


@router.get("/{membership_id}", response_model=schemas.MembershipRead)
def get_membership(membership_id: int, db: Session = Depends(get_db)) -> schemas.MembershipRead:
    try:
        return MembershipService.get_membership(db, membership_id)
    except GymServiceError as exc:
        raise http_error(exc) from exc
