from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Attendance session status as stored by the database collaborator."""

    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    ON_LEAVE = "on_leave"
    ABSENT = "absent"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "AttendanceStatus":
        """Unknown or missing values fall back to CHECKED_IN."""
        if value is None:
            return cls.CHECKED_IN
        normalized = value.strip().lower().replace(" ", "_")
        for status in cls:
            if status.value == normalized:
                return status
        return cls.CHECKED_IN


class LocationRestrictionType(str, Enum):
    """Kind of check-in location restriction."""

    ANYWHERE = "anywhere"
    SPECIFIC = "specific"
    MULTIPLE = "multiple"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "LocationRestrictionType":
        """Case-insensitive match on name or value; unknown values mean ANYWHERE."""
        v = (value or "").strip().lower()
        for item in cls:
            if item.value == v or item.name.lower() == v:
                return item
        return cls.ANYWHERE


class MovementType(str, Enum):
    SIGNIFICANT_MOVE = "SIGNIFICANT_MOVE"
    STATIONARY_STAY = "STATIONARY_STAY"
    RETURNED_TO_CHECKIN = "RETURNED_TO_CHECKIN"
    LEFT_CHECKIN_AREA = "LEFT_CHECKIN_AREA"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "MovementType":
        for item in cls:
            if item.value == value:
                return item
        return cls.SIGNIFICANT_MOVE


class LeaveType(str, Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    EMERGENCY = "emergency"
    UNPAID = "unpaid"

    @property
    def is_unlimited(self) -> bool:
        return self in UNLIMITED_LEAVE_TYPES

    @classmethod
    def from_value(cls, value: Optional[str]) -> "LeaveType":
        """Unknown values fall back to PERSONAL."""
        for item in cls:
            if item.value == value:
                return item
        return cls.PERSONAL


UNLIMITED_LEAVE_TYPES = frozenset({LeaveType.EMERGENCY, LeaveType.UNPAID})
BOUNDED_LEAVE_TYPES = (LeaveType.VACATION, LeaveType.SICK, LeaveType.PERSONAL)


class LeaveStatus(str, Enum):
    """Approval flow of a leave request (PENDING -> terminal)."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "LeaveStatus":
        """Unknown values fall back to PENDING so the request can be re-reviewed."""
        for item in cls:
            if item.value == value:
                return item
        return cls.PENDING


class WorkDay(str, Enum):
    """Day of the week a shift configuration refers to."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def from_date(cls, value: date) -> "WorkDay":
        return list(cls)[value.weekday()]

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["WorkDay"]:
        """Unknown day names yield None so callers can skip them."""
        v = (value or "").strip().upper()
        for item in cls:
            if item.value == v:
                return item
        return None
