"""Pydantic schemas for payments."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.payment import PaymentMethod, PaymentStatus


class PaymentBase(BaseModel):
    """Shared attributes for payment operations."""

    member_id: int = Field(..., description="Member who made the payment")
    membership_id: Optional[int] = Field(
        default=None, description="Membership the payment is attributed to, if any"
    )
    amount: Decimal = Field(..., gt=0, decimal_places=2, description="Amount received")
    payment_method: PaymentMethod = Field(..., description="Channel used to pay")
    description: Optional[str] = Field(default=None, description="Optional note for the payment")


class PaymentCreate(PaymentBase):
    """Schema used when recording a payment."""

    payment_date: Optional[date] = Field(
        default=None, description="Date of the payment; defaults to today"
    )
    status: PaymentStatus = Field(default=PaymentStatus.COMPLETED)


class PaymentRead(PaymentBase):
    """Schema returned when reading payment data."""

    id: int
    payment_date: date
    status: PaymentStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
