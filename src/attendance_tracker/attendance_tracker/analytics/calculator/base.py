from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceSession


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_seconds(self, session: AttendanceSession) -> float:
        raise NotImplementedError
