from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.locks import KeyedLock
from ..common.validators import require_non_empty
from ..core.enums import BOUNDED_LEAVE_TYPES, LeaveStatus, LeaveType
from ..core.exceptions import InsufficientBalance, NotFound, NotPending, ValidationError
from .model import LeaveAllowance, LeaveBalance, LeaveRequest, LeaveSummary
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveBalanceLedger:
    """Leave requests and the per-(employee, year) balances they draw from."""

    def __init__(self, leaves: LeaveRepository, *, locks: KeyedLock | None = None):
        self._leaves = leaves
        self._locks = locks or KeyedLock()

    def get_balance(self, employee_id: str, year: int) -> LeaveBalance:
        """Stored balance, or an all-zero balance when none was recorded."""
        return self._leaves.get_balance(employee_id, int(year)) or LeaveBalance(employee_id=employee_id, year=int(year))

    def remaining(self, employee_id: str, year: int, leave_type: LeaveType) -> float:
        return self.get_balance(employee_id, year).remaining(leave_type)

    @staticmethod
    def can_approve(balance: LeaveBalance, request: LeaveRequest) -> bool:
        if request.leave_type.is_unlimited:
            return True
        return request.number_of_days <= balance.remaining(request.leave_type)

    def set_allowance(self, employee_id: str, year: int, leave_type: LeaveType, total: int) -> LeaveBalance:
        if leave_type.is_unlimited:
            raise ValidationError(f"{leave_type.value} leave has no allowance")
        if int(total) < 0:
            raise ValidationError("Allowance must not be negative")

        with self._locks.hold(employee_id):
            balance = self.get_balance(employee_id, year)
            allowance = balance.allowance(leave_type)
            if allowance.used > int(total):
                raise ValidationError("Allowance cannot be lower than the days already used")
            allowance.total = int(total)
            self._leaves.save_balance(balance)
        return balance

    def summaries(self, employee_id: str, year: int) -> list[LeaveSummary]:
        balance = self.get_balance(employee_id, year)
        return [
            LeaveSummary(
                leave_type=t,
                total=int(balance.total(t)),
                used=balance.used(t),
                remaining=int(balance.remaining(t)),
            )
            for t in BOUNDED_LEAVE_TYPES
        ]

    def submit(
        self,
        *,
        employee_id: str,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: str,
        now: datetime | None = None,
    ) -> LeaveRequest:
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")
        reason = require_non_empty(reason, "Reason")

        request = LeaveRequest(
            request_id=uuid.uuid4().hex,
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            submitted_at=now or now_local(),
        )
        self._leaves.create_request(request)
        logger.info("Leave request %s submitted by %s (%s, %d days)", request.request_id, employee_id, leave_type.value, request.number_of_days)
        return request

    def _get_pending(self, request_id: str) -> LeaveRequest:
        request = self._leaves.get_request(request_id)
        if not request:
            raise NotFound("Leave request does not exist")
        if request.status != LeaveStatus.PENDING:
            raise NotPending(f"Leave request is already {request.status.value}")
        return request

    def _employee_of(self, request_id: str) -> str:
        request = self._leaves.get_request(request_id)
        if not request:
            raise NotFound("Leave request does not exist")
        return request.employee_id

    def approve(
        self,
        request_id: str,
        reviewer: str,
        *,
        now: datetime | None = None,
        notes: Optional[str] = None,
    ) -> LeaveRequest:
        with self._locks.hold(self._employee_of(request_id)):
            request = self._get_pending(request_id)
            balance = self.get_balance(request.employee_id, request.start_date.year)
            if not self.can_approve(balance, request):
                raise InsufficientBalance(
                    f"Only {balance.remaining(request.leave_type)} {request.leave_type.value} days left, "
                    f"{request.number_of_days} requested"
                )

            approved = replace(
                request,
                status=LeaveStatus.APPROVED,
                reviewed_by=reviewer,
                reviewed_at=now or now_local(),
                review_notes=(notes or "").strip() or None,
            )
            if not request.leave_type.is_unlimited:
                allowance: LeaveAllowance = balance.allowance(request.leave_type)
                allowance.used += request.number_of_days
                self._leaves.save_balance(balance)
            self._leaves.save_request(approved)

        logger.info("Leave request %s approved by %s", request_id, reviewer)
        return approved

    def reject(
        self,
        request_id: str,
        reviewer: str,
        *,
        now: datetime | None = None,
        notes: Optional[str] = None,
    ) -> LeaveRequest:
        return self._close(request_id, LeaveStatus.REJECTED, reviewer=reviewer, now=now, notes=notes)

    def cancel(self, request_id: str, *, now: datetime | None = None) -> LeaveRequest:
        return self._close(request_id, LeaveStatus.CANCELLED, reviewer=None, now=now, notes=None)

    def _close(
        self,
        request_id: str,
        status: LeaveStatus,
        *,
        reviewer: Optional[str],
        now: datetime | None,
        notes: Optional[str],
    ) -> LeaveRequest:
        with self._locks.hold(self._employee_of(request_id)):
            request = self._get_pending(request_id)
            closed = replace(
                request,
                status=status,
                reviewed_by=reviewer,
                reviewed_at=(now or now_local()) if reviewer else None,
                review_notes=(notes or "").strip() or None,
            )
            self._leaves.save_request(closed)

        logger.info("Leave request %s %s", request_id, status.value)
        return closed

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        return self._leaves.list_requests(employee_id=employee_id, status=status, limit=limit)
