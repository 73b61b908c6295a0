"""Revenue reporting over completed payments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Optional, Protocol

from sqlalchemy.orm import Session

from .. import models


class _PaymentLike(Protocol):
    amount: Decimal
    membership_id: Optional[int]
    payment_method: models.PaymentMethod


def _empty_breakdown() -> Dict[str, Decimal]:
    return {method.value: Decimal("0") for method in models.PaymentMethod}


@dataclass
class RevenueTotals:
    """Accumulated revenue figures for a period."""

    period_start: date
    period_end: date
    total_revenue: Decimal = Decimal("0")
    membership_revenue: Decimal = Decimal("0")
    other_revenue: Decimal = Decimal("0")
    payment_count: int = 0
    breakdown_by_method: Dict[str, Decimal] = field(default_factory=_empty_breakdown)

    def add(self, payment: _PaymentLike) -> None:
        amount = Decimal(str(payment.amount))
        self.total_revenue += amount
        if payment.membership_id is not None:
            self.membership_revenue += amount
        else:
            self.other_revenue += amount
        method = models.PaymentMethod(payment.payment_method).value
        self.breakdown_by_method[method] += amount
        self.payment_count += 1

    def as_dict(self) -> dict:
        return {
            "period_start": self.period_start,
            "period_end": self.period_end,
            "total_revenue": self.total_revenue,
            "membership_revenue": self.membership_revenue,
            "other_revenue": self.other_revenue,
            "payment_count": self.payment_count,
            "breakdown_by_method": dict(self.breakdown_by_method),
        }


def summarize_payments(
    payments: Iterable[_PaymentLike], period_start: date, period_end: date
) -> RevenueTotals:
    """Fold already-selected payments into totals. No rounding is applied."""

    totals = RevenueTotals(period_start=period_start, period_end=period_end)
    for payment in payments:
        totals.add(payment)
    return totals


class RevenueReportService:
    """Builds revenue reports from the payments ledger."""

    @staticmethod
    def completed_payments(
        db: Session, period_start: date, period_end: date
    ) -> list[models.Payment]:
        return (
            db.query(models.Payment)
            .filter(
                models.Payment.payment_date >= period_start,
                models.Payment.payment_date <= period_end,
                models.Payment.status == models.PaymentStatus.COMPLETED,
            )
            .all()
        )

    @classmethod
    def generate(cls, db: Session, period_start: date, period_end: date) -> RevenueTotals:
        payments = cls.completed_payments(db, period_start, period_end)
        return summarize_payments(payments, period_start, period_end)
