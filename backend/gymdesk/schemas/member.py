"""Pydantic schemas for members and their progress measurements."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class MemberBase(BaseModel):
    """Attributes shared by create and read operations."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    medical_conditions: Optional[str] = None


class MemberCreate(MemberBase):
    """Schema used when registering a member."""

    pass


class MemberUpdate(BaseModel):
    """Partial update; only the fields sent by the caller are applied."""

    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    medical_conditions: Optional[str] = None


class MemberRead(MemberBase):
    """Schema used when returning member data."""

    id: int
    join_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MemberProgressCreate(BaseModel):
    weight: Optional[Decimal] = Field(default=None, gt=0, description="Body weight")
    body_fat_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)
    muscle_mass: Optional[Decimal] = Field(default=None, gt=0)
    notes: Optional[str] = None
    recorded_date: Optional[date] = Field(
        default=None, description="Measurement date; defaults to today"
    )


class MemberProgressRead(BaseModel):
    id: int
    member_id: int
    weight: Optional[Decimal] = None
    body_fat_percentage: Optional[Decimal] = None
    muscle_mass: Optional[Decimal] = None
    notes: Optional[str] = None
    recorded_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
