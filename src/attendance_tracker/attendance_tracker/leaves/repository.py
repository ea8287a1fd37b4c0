from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveBalance, LeaveRequest


class LeaveRepository(Protocol):
    # Leave requests
    def create_request(self, request: LeaveRequest) -> None:
        raise NotImplementedError

    def get_request(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def save_request(self, request: LeaveRequest) -> None:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    # Leave balances
    def get_balance(self, employee_id: str, year: int) -> Optional[LeaveBalance]:
        raise NotImplementedError

    def save_balance(self, balance: LeaveBalance) -> None:
        raise NotImplementedError
