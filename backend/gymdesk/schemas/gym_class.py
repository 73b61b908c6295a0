"""Pydantic schemas for classes and class attendance."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

START_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")


def _parse_start_time(value):
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, str):
        match = START_TIME_PATTERN.match(value.strip())
        if match is None:
            raise ValueError("start_time must use the HH:MM format")
        return time(int(match.group(1)), int(match.group(2)))
    raise ValueError("start_time must use the HH:MM format")


class GymClassBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    trainer_id: int
    max_capacity: int = Field(..., gt=0)
    duration_minutes: int = Field(..., gt=0)
    class_date: date
    start_time: time = Field(..., description="Start time in HH:MM format")

    @field_validator("start_time", mode="before")
    @classmethod
    def _validate_start_time(cls, value):
        return _parse_start_time(value)


class GymClassCreate(GymClassBase):
    """Schema used when scheduling a class."""

    pass


class GymClassUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    trainer_id: Optional[int] = None
    max_capacity: Optional[int] = Field(default=None, gt=0)
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    class_date: Optional[date] = None
    start_time: Optional[time] = None
    is_cancelled: Optional[bool] = None

    @field_validator("start_time", mode="before")
    @classmethod
    def _validate_start_time(cls, value):
        return _parse_start_time(value)


class GymClassRead(GymClassBase):
    id: int
    is_cancelled: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("start_time")
    def _serialize_start_time(self, value: time) -> str:
        return value.strftime("%H:%M")


class ClassAttendanceCreate(BaseModel):
    """Schema used when registering a member for a class."""

    class_id: int
    member_id: int
    attended: bool
    check_in_time: Optional[datetime] = None


class ClassAttendanceUpdate(BaseModel):
    attended: Optional[bool] = None
    check_in_time: Optional[datetime] = None


class ClassAttendanceRead(ClassAttendanceCreate):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
