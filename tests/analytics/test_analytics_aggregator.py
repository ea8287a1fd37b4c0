from datetime import datetime, timedelta

import pytest

from src.attendance_tracker.attendance_tracker.analytics.calculator.base import DurationCalculator
from src.attendance_tracker.attendance_tracker.analytics.model import AnalyticsFilter
from src.attendance_tracker.attendance_tracker.analytics.service import AnalyticsAggregator
from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceSession
from src.attendance_tracker.attendance_tracker.geo.model import Coordinate

HQ = Coordinate(24.7136, 46.6753)


def _session(sid, emp, start, hours=None, place="HQ"):
    return AttendanceSession(
        session_id=sid,
        employee_id=emp,
        check_in_time=start,
        check_in_coordinate=HQ,
        check_in_place_name=place,
        check_out_time=start + timedelta(hours=hours) if hours is not None else None,
        total_duration_seconds=hours * 3600 if hours is not None else None,
    )


@pytest.fixture()
def records():
    mon = datetime(2024, 5, 6, 8, 0)
    tue = datetime(2024, 5, 7, 9, 30)
    return [
        _session("s1", "e1", mon, 8),
        _session("s2", "e2", mon, 6, place="Warehouse"),
        _session("s3", "e1", tue, 7),
        _session("s4", "e2", tue, None),
    ]


def test_average_hours_ignores_open_sessions(records):
    assert AnalyticsAggregator().average_work_hours(records) == 7.0


def test_average_hours_empty():
    assert AnalyticsAggregator().average_work_hours([]) == 0.0


def test_attendance_rate(records):
    agg = AnalyticsAggregator()

    assert agg.attendance_rate(records, total_employees=2, days=2) == 100.0
    assert agg.attendance_rate(records, total_employees=4, days=2) == 50.0
    assert agg.attendance_rate(records, total_employees=0, days=2) == 0.0


def test_top_locations_ranked_by_count(records):
    top = AnalyticsAggregator().top_locations(records)

    assert [(t.location_name, t.check_in_count) for t in top] == [("HQ", 3), ("Warehouse", 1)]
    assert top[0].percentage == 75.0


def test_top_locations_limit():
    start = datetime(2024, 5, 6, 8, 0)
    records = [_session(f"s{i}", "e1", start, 1, place=f"Site {i}") for i in range(8)]

    assert len(AnalyticsAggregator().top_locations(records)) == 5


def test_hourly_activity_has_24_buckets(records):
    buckets = AnalyticsAggregator().hourly_activity(records)

    assert len(buckets) == 24
    assert buckets[8].count == 2
    assert buckets[9].count == 2
    assert sum(b.count for b in buckets) == 4


def test_daily_trends(records):
    trends = AnalyticsAggregator().daily_trends(records, total_employees=4)

    assert [t.day.day for t in trends] == [6, 7]
    assert trends[0].check_ins == 2
    assert trends[0].avg_hours == 7.0
    assert trends[0].attendance_rate == 50.0
    assert trends[1].avg_hours == 7.0


def test_employee_summaries_sorted_by_time(records):
    summary = AnalyticsAggregator().employee_summaries(records)

    assert [(s.employee_id, s.total_hours) for s in summary] == [("e1", "15:00"), ("e2", "06:00")]
    assert summary[0].sessions == 2


def test_custom_calculator_is_used(records):
    class HalfDay(DurationCalculator):
        def worked_seconds(self, session):
            return 4 * 3600

    assert AnalyticsAggregator(calculator=HalfDay()).average_work_hours(records) == 4.0


def test_dashboard_to_dict(records):
    metrics = AnalyticsAggregator().build_dashboard(records, total_employees=2, active_today=1, days=2)

    data = metrics.to_dict()
    assert data["active_today"] == 1
    assert data["daily_trends"][0]["day"] == "2024-05-06"
    assert data["top_locations"][0]["location_name"] == "HQ"


def test_filter_presets():
    assert [f.days for f in AnalyticsFilter] == [7, 30, 90]
