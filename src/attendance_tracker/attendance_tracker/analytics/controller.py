from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import days_ago, now_local, start_of_day
from ..container import Container
from ..core.constants import DEFAULT_REPORT_DAYS
from .model import AnalyticsFilter


def register(app: Flask, container: Container) -> None:
    def _window_days() -> int:
        preset = (request.args.get("range") or "").upper()
        if preset in AnalyticsFilter.__members__:
            return AnalyticsFilter[preset].days
        return max(request.args.get("days", default=DEFAULT_REPORT_DAYS, type=int), 1)

    @app.route("/api/analytics/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        days = _window_days()
        total_employees = max(request.args.get("employees", default=0, type=int), 0)

        now = now_local()
        records = container.attendance_service.list_sessions_between(
            start=days_ago(start_of_day(now), days - 1),
            end=now,
        )
        metrics = container.analytics.build_dashboard(
            records,
            total_employees=total_employees,
            active_today=container.attendance_service.count_active(),
            days=days,
        )
        return jsonify({"success": True, "metrics": metrics.to_dict()})

    @app.route("/api/analytics/hours", methods=["GET"], endpoint="api_hours_summary")
    def api_hours_summary():
        now = now_local()
        records = container.attendance_service.list_sessions_between(start=days_ago(now, _window_days()), end=now)
        summary = container.analytics.employee_summaries(records)
        return jsonify(
            {
                "success": True,
                "summary": [
                    {"employeeId": s.employee_id, "sessions": s.sessions, "totalHours": s.total_hours}
                    for s in summary
                ],
            }
        )
