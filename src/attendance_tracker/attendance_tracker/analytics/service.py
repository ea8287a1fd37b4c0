from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceSession
from ..core.constants import DEFAULT_TOP_LOCATIONS
from .calculator.base import DurationCalculator
from .calculator.standard_calculator import StandardDurationCalculator
from .model import DailyTrend, DashboardMetrics, EmployeeHoursSummary, HourlyStats, LocationStats


class AnalyticsAggregator:
    """Dashboard metrics folded over attendance sessions; no state of its own."""

    def __init__(self, *, calculator: Optional[DurationCalculator] = None):
        self._calculator = calculator or StandardDurationCalculator()

    def _average_hours(self, records: Iterable[AttendanceSession]) -> float:
        completed = [r for r in records if r.total_duration_seconds is not None]
        if not completed:
            return 0.0
        total_seconds = sum(self._calculator.worked_seconds(r) for r in completed)
        return total_seconds / 3600.0 / len(completed)

    def average_work_hours(self, records: Sequence[AttendanceSession]) -> float:
        return self._average_hours(records)

    def attendance_rate(self, records: Sequence[AttendanceSession], total_employees: int, days: int) -> float:
        if total_employees <= 0:
            return 0.0
        expected = total_employees * max(int(days), 1)
        return len(records) / expected * 100.0

    def top_locations(self, records: Sequence[AttendanceSession], *, limit: int = DEFAULT_TOP_LOCATIONS) -> list[LocationStats]:
        counts = Counter(r.check_in_place_name for r in records if r.check_in_place_name)
        total = len(records)
        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))[:limit]
        return [
            LocationStats(
                location_name=name,
                check_in_count=count,
                percentage=count / total * 100.0 if total else 0.0,
            )
            for name, count in ranked
        ]

    def hourly_activity(self, records: Sequence[AttendanceSession]) -> list[HourlyStats]:
        counts = Counter(r.check_in_time.hour for r in records)
        return [HourlyStats(hour=h, count=counts.get(h, 0)) for h in range(24)]

    def daily_trends(self, records: Sequence[AttendanceSession], total_employees: int) -> list[DailyTrend]:
        by_day: dict[date, list[AttendanceSession]] = defaultdict(list)
        for r in records:
            by_day[r.check_in_time.date()].append(r)

        trends = []
        for day in sorted(by_day):
            day_records = by_day[day]
            employees = {r.employee_id for r in day_records}
            rate = len(employees) / total_employees * 100.0 if total_employees > 0 else 0.0
            trends.append(
                DailyTrend(
                    day=day,
                    check_ins=len(day_records),
                    avg_hours=self._average_hours(day_records),
                    attendance_rate=rate,
                )
            )
        return trends

    def employee_summaries(self, records: Sequence[AttendanceSession]) -> list[EmployeeHoursSummary]:
        seconds: dict[str, float] = defaultdict(float)
        sessions: Counter = Counter()
        for r in records:
            seconds[r.employee_id] += self._calculator.worked_seconds(r)
            sessions[r.employee_id] += 1

        summary = [
            EmployeeHoursSummary(employee_id=e, sessions=sessions[e], total_minutes=int(seconds[e] // 60))
            for e in seconds
        ]
        summary.sort(key=lambda s: s.total_minutes, reverse=True)
        return summary

    def build_dashboard(
        self,
        records: Sequence[AttendanceSession],
        *,
        total_employees: int,
        active_today: int,
        days: int,
    ) -> DashboardMetrics:
        return DashboardMetrics(
            total_employees=int(total_employees),
            active_today=int(active_today),
            average_work_hours=self.average_work_hours(records),
            attendance_rate=self.attendance_rate(records, total_employees, days),
            top_locations=self.top_locations(records),
            hourly_activity=self.hourly_activity(records),
            daily_trends=self.daily_trends(records, total_employees),
        )
