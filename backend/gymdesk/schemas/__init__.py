"""Expose Pydantic schemas for convenient imports."""

from .gym_class import (
    ClassAttendanceCreate,
    ClassAttendanceRead,
    ClassAttendanceUpdate,
    GymClassBase,
    GymClassCreate,
    GymClassRead,
    GymClassUpdate,
)
from .member import (
    MemberBase,
    MemberCreate,
    MemberProgressCreate,
    MemberProgressRead,
    MemberRead,
    MemberUpdate,
)
from .membership import (
    MembershipCreate,
    MembershipRead,
    MembershipTypeBase,
    MembershipTypeCreate,
    MembershipTypeRead,
)
from .payment import PaymentBase, PaymentCreate, PaymentRead
from .report import RevenueReport
from .trainer import TrainerBase, TrainerCreate, TrainerRead, TrainerUpdate

__all__ = [
    "ClassAttendanceCreate",
    "ClassAttendanceRead",
    "ClassAttendanceUpdate",
    "GymClassBase",
    "GymClassCreate",
    "GymClassRead",
    "GymClassUpdate",
    "MemberBase",
    "MemberCreate",
    "MemberProgressCreate",
    "MemberProgressRead",
    "MemberRead",
    "MemberUpdate",
    "MembershipCreate",
    "MembershipRead",
    "MembershipTypeBase",
    "MembershipTypeCreate",
    "MembershipTypeRead",
    "PaymentBase",
    "PaymentCreate",
    "PaymentRead",
    "RevenueReport",
    "TrainerBase",
    "TrainerCreate",
    "TrainerRead",
    "TrainerUpdate",
]
