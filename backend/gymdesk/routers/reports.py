"""Router exposing revenue reporting."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import RevenueReportService

LOGGER = logging.getLogger(__name__)

router = APIRouter()


@router.get("/revenue", response_model=schemas.RevenueReport)
def revenue_report(
    period_start: date = Query(..., description="First day of the period (inclusive)"),
    period_end: date = Query(..., description="Last day of the period (inclusive)"),
    db: Session = Depends(get_db),
) -> schemas.RevenueReport:
    """Summarize completed payments whose payment date falls within the period."""

    if period_start > period_end:
        LOGGER.warning(
            "Revenue report requested with reversed range",
            extra={"period_start": str(period_start), "period_end": str(period_end)},
        )
    totals = RevenueReportService.generate(db, period_start, period_end)
    return schemas.RevenueReport(**totals.as_dict())
