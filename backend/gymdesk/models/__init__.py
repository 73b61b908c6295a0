"""Expose SQLAlchemy models for convenient imports."""

from .gym_class import ClassAttendance, GymClass
from .member import Member, MemberProgress
from .membership import Membership, MembershipStatus, MembershipType
from .payment import Payment, PaymentMethod, PaymentStatus
from .trainer import Trainer

__all__ = [
    "ClassAttendance",
    "GymClass",
    "Member",
    "MemberProgress",
    "Membership",
    "MembershipStatus",
    "MembershipType",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "Trainer",
]
