"""SQLAlchemy model definitions for gym members and their progress log."""

from __future__ import annotations

from datetime import date

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from ..database import Base


class Member(Base):
    """Represents a gym member."""

    __tablename__ = "members"

    id = Column("member_id", Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    phone = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    join_date = Column(Date, nullable=False, default=date.today)
    emergency_contact_name = Column(String, nullable=True)
    emergency_contact_phone = Column(String, nullable=True)
    medical_conditions = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    progress_entries = relationship(
        "MemberProgress",
        back_populates="member",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    memberships = relationship(
        "Membership",
        back_populates="member",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    payments = relationship(
        "Payment",
        back_populates="member",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    attendance = relationship(
        "ClassAttendance",
        back_populates="member",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class MemberProgress(Base):
    """Body measurements recorded for a member on a given date."""

    __tablename__ = "member_progress"
    __table_args__ = (
        CheckConstraint("weight IS NULL OR weight > 0", name="ck_member_progress_weight_positive"),
        CheckConstraint(
            "body_fat_percentage IS NULL OR (body_fat_percentage >= 0 AND body_fat_percentage <= 100)",
            name="ck_member_progress_body_fat_range",
        ),
        CheckConstraint(
            "muscle_mass IS NULL OR muscle_mass > 0",
            name="ck_member_progress_muscle_mass_positive",
        ),
    )

    id = Column("progress_id", Integer, primary_key=True, autoincrement=True)
    member_id = Column(
        Integer,
        ForeignKey("members.member_id", ondelete="CASCADE"),
        nullable=False,
    )
    weight = Column(Numeric(5, 2), nullable=True)
    body_fat_percentage = Column(Numeric(5, 2), nullable=True)
    muscle_mass = Column(Numeric(5, 2), nullable=True)
    notes = Column(Text, nullable=True)
    recorded_date = Column(Date, nullable=False, default=date.today)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    member = relationship("Member", back_populates="progress_entries")


Index("member_progress_member_date_idx", MemberProgress.member_id, MemberProgress.recorded_date)
