from __future__ import annotations

from .base import DurationCalculator
from ...attendance.model import AttendanceSession


class StandardDurationCalculator(DurationCalculator):
    """Standard rule: recorded total duration, missing values count as 0."""

    def worked_seconds(self, session: AttendanceSession) -> float:
        return max(float(session.total_duration_seconds or 0), 0.0)
