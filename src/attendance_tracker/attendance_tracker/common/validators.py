from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return value


def require_latitude_longitude(latitude: float, longitude: float) -> None:
    if not -90.0 <= float(latitude) <= 90.0:
        raise ValidationError("Latitude must be between -90 and 90")
    if not -180.0 <= float(longitude) <= 180.0:
        raise ValidationError("Longitude must be between -180 and 180")
