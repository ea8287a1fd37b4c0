from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..common.http import error_response, json_body, require_field
from ..container import Container
from ..core.enums import WorkDay
from ..core.exceptions import DomainError, ValidationError
from .model import ShiftConfig


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shift", methods=["GET"], endpoint="api_get_shift")
    def api_get_shift():
        return jsonify({"success": True, "shift": container.shift_service.get_config().to_dict()})

    @app.route("/api/shift", methods=["PUT"], endpoint="api_save_shift")
    def api_save_shift():
        try:
            config = container.shift_service.save_config(ShiftConfig.from_dict(json_body()))
            return jsonify({"success": True, "shift": config.to_dict()})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/shift/days/<day>", methods=["PUT"], endpoint="api_update_shift_day")
    def api_update_shift_day(day: str):
        try:
            work_day = WorkDay.from_value(day)
            if work_day is None:
                raise ValidationError(f"Unknown day {day!r}")
            data = json_body()
            config = container.shift_service.update_day(
                work_day,
                start_time=str(require_field(data, "startTime")),
                end_time=str(require_field(data, "endTime")),
                is_work_day=bool(data.get("isWorkDay", True)),
            )
            return jsonify({"success": True, "shift": config.to_dict()})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/shift/check", methods=["GET"], endpoint="api_check_shift")
    def api_check_shift():
        try:
            raw = request.args.get("at")
            try:
                at = parse_iso_datetime(raw) if raw else now_local()
            except ValueError:
                raise ValidationError("at must be an ISO timestamp")
            return jsonify(
                {
                    "success": True,
                    "at": at.isoformat(),
                    "workDay": container.shift_service.is_work_day(at.date()),
                    "withinSchedule": container.shift_service.is_within_schedule(at),
                }
            )
        except DomainError as e:
            return error_response(e)
