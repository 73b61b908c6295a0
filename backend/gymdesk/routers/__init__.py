"""Routers package."""

from .classes import attendance_router
from .classes import router as classes_router
from .members import router as members_router
from .memberships import router as memberships_router
from .memberships import types_router as membership_types_router
from .payments import router as payments_router
from .reports import router as reports_router
from .trainers import router as trainers_router

__all__ = [
    "attendance_router",
    "classes_router",
    "members_router",
    "membership_types_router",
    "memberships_router",
    "payments_router",
    "reports_router",
    "trainers_router",
]
