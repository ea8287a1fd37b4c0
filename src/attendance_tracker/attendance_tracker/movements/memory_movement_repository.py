from __future__ import annotations

from typing import Optional, Sequence

from .model import MovementEvent


class InMemoryMovementRepository:
    def __init__(self):
        self._by_employee: dict[str, list[MovementEvent]] = {}

    def append(self, event: MovementEvent) -> None:
        self._by_employee.setdefault(event.employee_id, []).append(event)

    def list_for_employee(self, employee_id: str, *, check_in_id: Optional[str] = None) -> Sequence[MovementEvent]:
        events = self._by_employee.get(employee_id, [])
        if check_in_id is not None:
            events = [e for e in events if e.check_in_id == check_in_id]
        return list(events)
