"""Pydantic schemas for membership plans and member subscriptions."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.membership import MembershipStatus


class MembershipTypeBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    duration_months: int = Field(..., gt=0, description="Length of the plan in calendar months")
    price: Decimal = Field(..., gt=0, description="Price charged for the whole plan")


class MembershipTypeCreate(MembershipTypeBase):
    pass


class MembershipTypeRead(MembershipTypeBase):
    id: int
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MembershipCreate(BaseModel):
    """Schema used when enrolling a member in a membership plan."""

    member_id: int
    membership_type_id: int
    start_date: Optional[date] = Field(
        default=None, description="First day of the membership; defaults to today"
    )


class MembershipRead(BaseModel):
    id: int
    member_id: int
    membership_type_id: int
    start_date: date
    end_date: date
    status: MembershipStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
