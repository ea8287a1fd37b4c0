from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from .model import AttendanceSession


class InMemoryAttendanceRepository:
    """Sessions keyed by id, with an index of the open session per employee."""

    def __init__(self):
        self._by_id: dict[str, AttendanceSession] = {}
        self._open_by_employee: dict[str, str] = {}

    def get_by_id(self, session_id: str) -> Optional[AttendanceSession]:
        return self._by_id.get(session_id)

    def get_open_for_employee(self, employee_id: str) -> Optional[AttendanceSession]:
        session_id = self._open_by_employee.get(employee_id)
        if not session_id:
            return None
        return self._by_id.get(session_id)

    def find_by_checkout_key(self, employee_id: str, idempotency_key: str) -> Optional[AttendanceSession]:
        for s in self._by_id.values():
            if s.employee_id == employee_id and s.checkout_idempotency_key == idempotency_key:
                return s
        return None

    def get_recent_for_employee(self, employee_id: str, limit: int) -> Sequence[AttendanceSession]:
        items = [s for s in self._by_id.values() if s.employee_id == employee_id]
        items.sort(key=lambda s: s.check_in_time, reverse=True)
        return items[:limit]

    def list_between(self, *, start: datetime, end: datetime) -> Sequence[AttendanceSession]:
        items = [s for s in self._by_id.values() if start <= s.check_in_time <= end]
        items.sort(key=lambda s: s.check_in_time)
        return items

    def count_open(self) -> int:
        return len(self._open_by_employee)

    def create(self, session: AttendanceSession) -> None:
        self._by_id[session.session_id] = session
        if session.is_open:
            self._open_by_employee[session.employee_id] = session.session_id

    def close(self, session: AttendanceSession) -> bool:
        current = self._by_id.get(session.session_id)
        if current is None or not current.is_open:
            return False
        self._by_id[session.session_id] = session
        self._open_by_employee.pop(session.employee_id, None)
        return True
