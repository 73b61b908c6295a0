"""Service layer encapsulating business logic for API routers."""

from .classes import AttendanceService, ClassService
from .lookups import (
    ConflictError,
    ConstraintViolationError,
    EntityNotFoundError,
    GymServiceError,
    InvalidStateError,
    ensure_entities,
    require_entity,
)
from .members import MemberService
from .memberships import MembershipService, add_months
from .payments import PaymentService
from .reports import RevenueReportService, RevenueTotals, summarize_payments
from .trainers import TrainerService

__all__ = [
    "AttendanceService",
    "ClassService",
    "ConflictError",
    "ConstraintViolationError",
    "EntityNotFoundError",
    "GymServiceError",
    "InvalidStateError",
    "ensure_entities",
    "require_entity",
    "MemberService",
    "MembershipService",
    "add_months",
    "PaymentService",
    "RevenueReportService",
    "RevenueTotals",
    "summarize_payments",
    "TrainerService",
]
