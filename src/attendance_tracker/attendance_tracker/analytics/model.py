from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum


class AnalyticsFilter(Enum):
    LAST_WEEK = 7
    LAST_MONTH = 30
    LAST_3_MONTHS = 90

    @property
    def days(self) -> int:
        return self.value


@dataclass(frozen=True)
class LocationStats:
    location_name: str
    check_in_count: int
    percentage: float


@dataclass(frozen=True)
class HourlyStats:
    hour: int
    count: int


@dataclass(frozen=True)
class DailyTrend:
    day: date
    check_ins: int
    avg_hours: float
    attendance_rate: float


@dataclass(frozen=True)
class EmployeeHoursSummary:
    employee_id: str
    sessions: int
    total_minutes: int

    @property
    def total_hours(self) -> str:
        return f"{self.total_minutes // 60:02d}:{self.total_minutes % 60:02d}"


@dataclass(frozen=True)
class DashboardMetrics:
    """Aggregated dashboard metrics."""

    total_employees: int
    active_today: int
    average_work_hours: float
    attendance_rate: float
    top_locations: list[LocationStats]
    hourly_activity: list[HourlyStats]
    daily_trends: list[DailyTrend]

    def to_dict(self) -> dict:
        data = asdict(self)
        for trend in data["daily_trends"]:
            trend["day"] = trend["day"].isoformat()
        return data
