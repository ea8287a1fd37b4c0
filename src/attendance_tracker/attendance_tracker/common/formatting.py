"""Display helpers used by the presentation layer.

These only shape values for display; none of them feed back into domain rules.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..geo.model import Coordinate


def format_duration(seconds: Optional[float]) -> str:
    """Render a duration as "Xh Ym", or "Ym" below one hour."""
    total = max(float(seconds or 0), 0.0)
    hours = int(total // 3600)
    minutes = int((total // 60) % 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_distance(distance_km: Optional[float]) -> str:
    km = float(distance_km or 0)
    if km < 1.0:
        return f"{km * 1000:.0f} m"
    return f"{km:.2f} km"


def time_ago(then: datetime, now: datetime) -> str:
    seconds = (now - then).total_seconds()
    minutes = int(seconds // 60)
    hours = minutes // 60
    days = hours // 24

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return then.strftime("%Y-%m-%d")


def localized_name(base: str, *, name_en: Optional[str] = None, name_ar: Optional[str] = None, is_arabic: bool = False) -> str:
    """Language-specific field first, then the base field."""
    specific = name_ar if is_arabic else name_en
    if specific:
        return specific
    return base or ""


def coordinate_label(coordinate: Coordinate) -> str:
    return f"{coordinate.latitude:.4f}, {coordinate.longitude:.4f}"
