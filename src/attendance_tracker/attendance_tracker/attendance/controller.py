from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.formatting import format_duration
from ..common.http import error_response, json_body, parse_coordinate, require_field
from ..container import Container
from ..core.exceptions import DomainError, NotFound


def register(app: Flask, container: Container) -> None:
    def _session_payload(session) -> dict:
        data = session.to_dict()
        data["formattedDuration"] = format_duration(session.total_duration_seconds) if session.check_out_time else None
        return data

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="api_checkin")
    def api_checkin():
        try:
            data = json_body()
            employee_id = str(require_field(data, "employeeId"))
            coordinate = parse_coordinate(data)
            session = container.attendance_service.check_in(
                employee_id,
                coordinate,
                data.get("placeName"),
                container.locations_repo.get_policy(),
                now=coordinate.captured_at or now_local(),
                centers=container.locations_repo.list_centers(active_only=True),
            )
            return jsonify({"success": True, "session": _session_payload(session)}), 201
        except DomainError as e:
            return error_response(e)

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="api_checkout")
    def api_checkout():
        try:
            data = json_body()
            employee_id = str(require_field(data, "employeeId"))
            coordinate = parse_coordinate(data)

            center = None
            center_id = data.get("centerId")
            if center_id:
                center = container.locations_repo.get_center(str(center_id))
                if center is None:
                    raise NotFound("Attendance center does not exist")

            session = container.attendance_service.check_out(
                employee_id,
                coordinate,
                data.get("placeName"),
                center,
                now=coordinate.captured_at or now_local(),
                idempotency_key=data.get("idempotencyKey") or request.headers.get("Idempotency-Key"),
            )
            container.movement_service.stop_tracking(employee_id)
            return jsonify({"success": True, "session": _session_payload(session)})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/attendance/<employee_id>/active", methods=["GET"], endpoint="api_active_session")
    def api_active_session(employee_id: str):
        session = container.attendance_service.get_active_session(employee_id)
        return jsonify({"success": True, "session": _session_payload(session) if session else None})

    @app.route("/api/attendance/<employee_id>/history", methods=["GET"], endpoint="api_history")
    def api_history(employee_id: str):
        limit = request.args.get("limit", type=int)
        rows = container.attendance_service.get_history(employee_id, limit=limit)
        return jsonify({"success": True, "sessions": [_session_payload(s) for s in rows]})
