"""SQLAlchemy model definitions for scheduled classes and their attendance."""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Time,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from ..database import Base


class GymClass(Base):
    """A class session led by a trainer on a specific date and time."""

    __tablename__ = "classes"
    __table_args__ = (
        CheckConstraint("max_capacity > 0", name="ck_classes_capacity_positive"),
        CheckConstraint("duration_minutes > 0", name="ck_classes_duration_positive"),
    )

    id = Column("class_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    trainer_id = Column(
        Integer,
        ForeignKey("trainers.trainer_id"),
        nullable=False,
    )
    max_capacity = Column(Integer, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    class_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    is_cancelled = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    trainer = relationship("Trainer", back_populates="classes")
    attendance = relationship(
        "ClassAttendance",
        back_populates="gym_class",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ClassAttendance(Base):
    """Registration of a member for a class and whether they showed up."""

    __tablename__ = "class_attendance"
    __table_args__ = (
        UniqueConstraint("class_id", "member_id", name="uq_class_attendance_class_member"),
    )

    id = Column("attendance_id", Integer, primary_key=True, autoincrement=True)
    class_id = Column(
        Integer,
        ForeignKey("classes.class_id", ondelete="CASCADE"),
        nullable=False,
    )
    member_id = Column(
        Integer,
        ForeignKey("members.member_id", ondelete="CASCADE"),
        nullable=False,
    )
    attended = Column(Boolean, nullable=False)
    check_in_time = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    gym_class = relationship("GymClass", back_populates="attendance")
    member = relationship("Member", back_populates="attendance")


Index("classes_date_time_idx", GymClass.class_date, GymClass.start_time)
Index("classes_trainer_idx", GymClass.trainer_id)
