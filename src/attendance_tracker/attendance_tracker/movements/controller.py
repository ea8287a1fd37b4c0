from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.formatting import time_ago
from ..common.http import error_response, json_body, parse_coordinate, require_field
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/movements/sample", methods=["POST"], endpoint="api_movement_sample")
    def api_movement_sample():
        try:
            data = json_body()
            employee_id = str(require_field(data, "employeeId"))
            sample = parse_coordinate(data)
            events = container.movement_service.record_sample(employee_id, sample, place_name=data.get("placeName"))
            return jsonify({"success": True, "events": [e.to_dict() for e in events]})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/movements/<employee_id>", methods=["GET"], endpoint="api_movements")
    def api_movements(employee_id: str):
        now = now_local()
        events = container.movement_service.list_events(employee_id, check_in_id=request.args.get("checkInId"))
        rows = []
        for e in events:
            row = e.to_dict()
            row["formattedDistance"] = e.formatted_distance()
            row["formattedDuration"] = e.formatted_duration()
            row["timeAgo"] = time_ago(e.start_time, now)
            rows.append(row)
        return jsonify({"success": True, "events": rows})
