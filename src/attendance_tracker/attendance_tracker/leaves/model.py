from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import BOUNDED_LEAVE_TYPES, LeaveStatus, LeaveType

# Remaining balance of EMERGENCY / UNPAID leave: never a finite number.
UNLIMITED = math.inf


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    submitted_at: datetime
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None

    @property
    def number_of_days(self) -> int:
        """Inclusive day count, never below 1."""
        return max((self.end_date - self.start_date).days + 1, 1)

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "employeeId": self.employee_id,
            "leaveType": self.leave_type.value,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "numberOfDays": self.number_of_days,
            "submittedAt": self.submitted_at.isoformat(),
            "reviewedBy": self.reviewed_by,
            "reviewedAt": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "reviewNotes": self.review_notes,
        }


@dataclass
class LeaveAllowance:
    total: int = 0
    used: int = 0


@dataclass
class LeaveBalance:
    """Per-employee, per-year leave bookkeeping; the only mutable leave aggregate."""

    employee_id: str
    year: int
    allowances: dict[LeaveType, LeaveAllowance] = field(default_factory=dict)

    def allowance(self, leave_type: LeaveType) -> LeaveAllowance:
        """Mutable allowance entry, created on first use. Write paths only."""
        return self.allowances.setdefault(leave_type, LeaveAllowance())

    def _peek(self, leave_type: LeaveType) -> LeaveAllowance:
        return self.allowances.get(leave_type) or LeaveAllowance()

    def total(self, leave_type: LeaveType) -> float:
        if leave_type.is_unlimited:
            return UNLIMITED
        return self._peek(leave_type).total

    def used(self, leave_type: LeaveType) -> int:
        if leave_type.is_unlimited:
            return 0
        return self._peek(leave_type).used

    def remaining(self, leave_type: LeaveType) -> float:
        if leave_type.is_unlimited:
            return UNLIMITED
        a = self._peek(leave_type)
        return max(a.total - a.used, 0)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "year": self.year,
            **{
                t.value: {"total": self.total(t), "used": self.used(t), "remaining": self.remaining(t)}
                for t in BOUNDED_LEAVE_TYPES
            },
        }


@dataclass(frozen=True)
class LeaveSummary:
    leave_type: LeaveType
    total: int
    used: int
    remaining: int

    @property
    def percentage(self) -> float:
        if self.total > 0:
            return self.used / self.total * 100.0
        return 0.0
