from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class TrainerBase(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    specialization: Optional[str] = None
    hourly_rate: Optional[Decimal] = Field(default=None, gt=0, description="Rate charged per hour")


class TrainerCreate(TrainerBase):
    """Schema used to hire a new trainer."""

    pass


class TrainerUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    specialization: Optional[str] = None
    hourly_rate: Optional[Decimal] = Field(default=None, gt=0)
    is_active: Optional[bool] = None


class TrainerRead(TrainerBase):
    """Schema representing stored trainers."""

    id: int
    hire_date: date
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
