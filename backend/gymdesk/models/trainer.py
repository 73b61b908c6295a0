"""SQLAlchemy model definitions for trainers."""

from __future__ import annotations

from datetime import date

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from ..database import Base


class Trainer(Base):
    """Represents a trainer who can lead classes."""

    __tablename__ = "trainers"
    __table_args__ = (
        CheckConstraint(
            "hourly_rate IS NULL OR hourly_rate > 0",
            name="ck_trainers_hourly_rate_positive",
        ),
    )

    id = Column("trainer_id", Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    phone = Column(String, nullable=True)
    specialization = Column(String, nullable=True)
    hourly_rate = Column(Numeric(8, 2), nullable=True)
    hire_date = Column(Date, nullable=False, default=date.today)
    is_active = Column(Boolean, nullable=False, default=True, server_default=expression.true())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    classes = relationship("GymClass", back_populates="trainer")
