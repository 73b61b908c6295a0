"""Pydantic schemas for revenue reports."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, Field


class RevenueReport(BaseModel):
    """Revenue collected from completed payments over a closed date range."""

    period_start: date
    period_end: date
    total_revenue: Decimal = Field(..., ge=0)
    membership_revenue: Decimal = Field(..., ge=0)
    other_revenue: Decimal = Field(..., ge=0)
    payment_count: int = Field(..., ge=0)
    breakdown_by_method: Dict[str, Decimal] = Field(
        ..., description="Summed amount per payment method; every known method is present"
    )
