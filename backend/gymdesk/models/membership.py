"""SQLAlchemy model definitions for membership plans and subscriptions."""

from __future__ import annotations

import enum

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from ..database import Base


class MembershipStatus(str, enum.Enum):
    """Lifecycle states of a membership."""

    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


MEMBERSHIP_STATUS_ENUM = Enum(
    MembershipStatus,
    name="membership_status_enum",
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
    native_enum=False,
    validate_strings=True,
)


class MembershipType(Base):
    """Catalog entry describing a purchasable membership plan."""

    __tablename__ = "membership_types"
    __table_args__ = (
        CheckConstraint("duration_months > 0", name="ck_membership_types_duration_positive"),
        CheckConstraint("price > 0", name="ck_membership_types_price_positive"),
    )

    id = Column("membership_type_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    duration_months = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=expression.true())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    memberships = relationship("Membership", back_populates="membership_type")


class Membership(Base):
    """A member's subscription to a membership type for a date range."""

    __tablename__ = "memberships"
    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_memberships_dates_ordered"),
    )

    id = Column("membership_id", Integer, primary_key=True, autoincrement=True)
    member_id = Column(
        Integer,
        ForeignKey("members.member_id", ondelete="CASCADE"),
        nullable=False,
    )
    membership_type_id = Column(
        Integer,
        ForeignKey("membership_types.membership_type_id"),
        nullable=False,
    )
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(
        MEMBERSHIP_STATUS_ENUM,
        nullable=False,
        default=MembershipStatus.ACTIVE,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    member = relationship("Member", back_populates="memberships")
    membership_type = relationship("MembershipType", back_populates="memberships")
    payments = relationship("Payment", back_populates="membership")


Index("memberships_member_idx", Membership.member_id)
Index("memberships_status_idx", Membership.status)
