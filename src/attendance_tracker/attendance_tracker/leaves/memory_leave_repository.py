from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveBalance, LeaveRequest


class InMemoryLeaveRepository:
    def __init__(self):
        self._requests: dict[str, LeaveRequest] = {}
        self._balances: dict[tuple[str, int], LeaveBalance] = {}

    def create_request(self, request: LeaveRequest) -> None:
        self._requests[request.request_id] = request

    def get_request(self, request_id: str) -> Optional[LeaveRequest]:
        return self._requests.get(request_id)

    def save_request(self, request: LeaveRequest) -> None:
        self._requests[request.request_id] = request

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        items = list(self._requests.values())
        if employee_id is not None:
            items = [r for r in items if r.employee_id == employee_id]
        if status is not None:
            items = [r for r in items if r.status == status]
        items.sort(key=lambda r: r.submitted_at, reverse=True)
        return items[:limit]

    def get_balance(self, employee_id: str, year: int) -> Optional[LeaveBalance]:
        return self._balances.get((employee_id, int(year)))

    def save_balance(self, balance: LeaveBalance) -> None:
        self._balances[(balance.employee_id, int(balance.year))] = balance
