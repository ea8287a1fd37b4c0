"""JSON helpers shared by the Flask controllers."""

from __future__ import annotations

from typing import Any

from flask import jsonify, request

from ..core.exceptions import (
    AlreadyCheckedIn,
    DomainError,
    InsufficientBalance,
    LocationDenied,
    NoOpenSession,
    NotFound,
    NotPending,
    ValidationError,
)
from ..geo.model import Coordinate
from .datetime_utils import parse_iso_datetime
from .validators import require_latitude_longitude

_STATUS_BY_ERROR = {
    ValidationError: 400,
    LocationDenied: 403,
    NotFound: 404,
    AlreadyCheckedIn: 409,
    NoOpenSession: 409,
    NotPending: 409,
    InsufficientBalance: 422,
}


def error_response(e: DomainError):
    status = next((code for kind, code in _STATUS_BY_ERROR.items() if isinstance(e, kind)), 400)
    return jsonify({"success": False, "code": e.code, "message": str(e)}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_field(data: dict, name: str) -> Any:
    value = data.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{name} is required")
    return value


def parse_coordinate(data: dict, name: str = "location") -> Coordinate:
    raw = require_field(data, name)
    if not isinstance(raw, dict):
        raise ValidationError(f"{name} must be an object")
    try:
        latitude = float(raw["latitude"])
        longitude = float(raw["longitude"])
        accuracy = float(raw["accuracy"]) if raw.get("accuracy") is not None else None
        ts = raw.get("timestamp")
        captured_at = parse_iso_datetime(ts) if ts else None
    except (KeyError, TypeError, ValueError):
        raise ValidationError(f"{name} must contain numeric latitude/longitude and an ISO timestamp")
    require_latitude_longitude(latitude, longitude)
    return Coordinate(latitude=latitude, longitude=longitude, accuracy=accuracy, captured_at=captured_at)
