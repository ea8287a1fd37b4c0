from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import MovementEvent


class MovementRepository(Protocol):
    def append(self, event: MovementEvent) -> None:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, check_in_id: Optional[str] = None) -> Sequence[MovementEvent]:
        """Events in the order they were recorded."""

        raise NotImplementedError
