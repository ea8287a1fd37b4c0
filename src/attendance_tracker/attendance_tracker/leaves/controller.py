from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import error_response, json_body, require_field
from ..container import Container
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    def _parse_date(value) -> object:
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError("Dates must use YYYY-MM-DD")

    @app.route("/api/leaves", methods=["POST"], endpoint="api_submit_leave")
    def api_submit_leave():
        try:
            data = json_body()
            req = container.leave_ledger.submit(
                employee_id=str(require_field(data, "employeeId")),
                leave_type=LeaveType.from_value(data.get("leaveType")),
                start_date=_parse_date(require_field(data, "startDate")),
                end_date=_parse_date(require_field(data, "endDate")),
                reason=str(data.get("reason") or ""),
            )
            return jsonify({"success": True, "request": req.to_dict()}), 201
        except DomainError as e:
            return error_response(e)

    @app.route("/api/leaves", methods=["GET"], endpoint="api_list_leaves")
    def api_list_leaves():
        status = request.args.get("status")
        rows = container.leave_ledger.list_requests(
            employee_id=request.args.get("employeeId"),
            status=LeaveStatus.from_value(status) if status else None,
        )
        return jsonify({"success": True, "requests": [r.to_dict() for r in rows]})

    @app.route("/api/leaves/<request_id>/approve", methods=["POST"], endpoint="api_approve_leave")
    def api_approve_leave(request_id: str):
        try:
            data = json_body()
            req = container.leave_ledger.approve(
                request_id,
                str(require_field(data, "reviewerId")),
                notes=data.get("notes"),
            )
            return jsonify({"success": True, "request": req.to_dict()})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/leaves/<request_id>/reject", methods=["POST"], endpoint="api_reject_leave")
    def api_reject_leave(request_id: str):
        try:
            data = json_body()
            req = container.leave_ledger.reject(
                request_id,
                str(require_field(data, "reviewerId")),
                notes=data.get("notes"),
            )
            return jsonify({"success": True, "request": req.to_dict()})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/leaves/<request_id>/cancel", methods=["POST"], endpoint="api_cancel_leave")
    def api_cancel_leave(request_id: str):
        try:
            req = container.leave_ledger.cancel(request_id)
            return jsonify({"success": True, "request": req.to_dict()})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/leaves/balance/<employee_id>/<int:year>", methods=["GET"], endpoint="api_leave_balance")
    def api_leave_balance(employee_id: str, year: int):
        summaries = container.leave_ledger.summaries(employee_id, year)
        return jsonify(
            {
                "success": True,
                "employeeId": employee_id,
                "year": year,
                "summaries": [
                    {
                        "type": s.leave_type.value,
                        "total": s.total,
                        "used": s.used,
                        "remaining": s.remaining,
                        "percentage": s.percentage,
                    }
                    for s in summaries
                ],
            }
        )

    @app.route("/api/leaves/balance/<employee_id>/<int:year>", methods=["PUT"], endpoint="api_set_allowance")
    def api_set_allowance(employee_id: str, year: int):
        try:
            data = json_body()
            leave_type = LeaveType.from_value(require_field(data, "leaveType"))
            try:
                total = int(require_field(data, "total"))
            except (TypeError, ValueError):
                raise ValidationError("total must be an integer")
            balance = container.leave_ledger.set_allowance(employee_id, year, leave_type, total)
            return jsonify({"success": True, "balance": balance.to_dict()})
        except DomainError as e:
            return error_response(e)
