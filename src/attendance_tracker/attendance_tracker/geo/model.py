from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime, to_local_naive


@dataclass(frozen=True)
class Coordinate:
    """A location sample (degrees), optionally with GPS accuracy and capture time."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None
    captured_at: Optional[datetime] = None

    def same_point(self, other: "Coordinate") -> bool:
        return self.latitude == other.latitude and self.longitude == other.longitude

    def to_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "accuracy": self.accuracy,
            "timestamp": self.captured_at.isoformat() if self.captured_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Coordinate":
        ts = data.get("timestamp") or data.get("captured_at")
        return cls(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            accuracy=float(data["accuracy"]) if data.get("accuracy") is not None else None,
            captured_at=parse_iso_datetime(ts) if isinstance(ts, str) else (to_local_naive(ts) if ts else None),
        )
