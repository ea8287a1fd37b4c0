from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceSession


class AttendanceRepository(Protocol):
    def get_by_id(self, session_id: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def get_open_for_employee(self, employee_id: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def find_by_checkout_key(self, employee_id: str, idempotency_key: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def get_recent_for_employee(self, employee_id: str, limit: int) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def list_between(self, *, start: datetime, end: datetime) -> Sequence[AttendanceSession]:
        """Sessions whose check-in time falls in [start, end]."""

        raise NotImplementedError

    def count_open(self) -> int:
        raise NotImplementedError

    def create(self, session: AttendanceSession) -> None:
        raise NotImplementedError

    def close(self, session: AttendanceSession) -> bool:
        """Persist the checked-out version of an open session; False if it was already closed."""

        raise NotImplementedError
