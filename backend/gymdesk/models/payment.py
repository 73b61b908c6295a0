"""SQLAlchemy model definitions for member payments."""

from __future__ import annotations

import enum
from datetime import date

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from ..database import Base


class PaymentMethod(str, enum.Enum):
    """Supported payment methods."""

    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    ONLINE = "online"


class PaymentStatus(str, enum.Enum):
    """Settlement state of a payment. Only completed payments count as revenue."""

    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"
    REFUNDED = "refunded"


PAYMENT_METHOD_ENUM = Enum(
    PaymentMethod,
    name="payment_method_enum",
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
    native_enum=False,
    validate_strings=True,
)

PAYMENT_STATUS_ENUM = Enum(
    PaymentStatus,
    name="payment_status_enum",
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
    native_enum=False,
    validate_strings=True,
)


class Payment(Base):
    """Money received from a member, optionally tied to a membership."""

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_payments_amount_positive"),
    )

    id = Column("payment_id", Integer, primary_key=True, autoincrement=True)
    member_id = Column(
        Integer,
        ForeignKey("members.member_id", ondelete="CASCADE"),
        nullable=False,
    )
    membership_id = Column(
        Integer,
        ForeignKey("memberships.membership_id"),
        nullable=True,
    )
    amount = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(PAYMENT_METHOD_ENUM, nullable=False)
    payment_date = Column(Date, nullable=False, default=date.today)
    description = Column(Text, nullable=True)
    status = Column(
        PAYMENT_STATUS_ENUM,
        nullable=False,
        default=PaymentStatus.COMPLETED,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    member = relationship("Member", back_populates="payments")
    membership = relationship("Membership", back_populates="payments")


Index("payments_date_status_idx", Payment.payment_date, Payment.status)
Index("payments_member_idx", Payment.member_id)
