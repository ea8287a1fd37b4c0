from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.formatting import format_distance, format_duration
from ..core.enums import MovementType
from ..geo.model import Coordinate


@dataclass(frozen=True)
class MovementEvent:
    """A classified movement of a checked-in employee. Immutable once created."""

    event_id: str
    employee_id: str
    movement_type: MovementType
    from_coordinate: Coordinate
    to_coordinate: Coordinate
    distance_km: float
    start_time: datetime
    check_in_id: str
    check_in_coordinate: Coordinate
    end_time: Optional[datetime] = None
    duration_seconds: Optional[float] = None
    place_name: Optional[str] = None

    def formatted_distance(self) -> str:
        return format_distance(self.distance_km)

    def formatted_duration(self) -> Optional[str]:
        if self.duration_seconds is None:
            return None
        return format_duration(self.duration_seconds)

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "employeeId": self.employee_id,
            "movementType": self.movement_type.value,
            "fromLatitude": self.from_coordinate.latitude,
            "fromLongitude": self.from_coordinate.longitude,
            "toLatitude": self.to_coordinate.latitude,
            "toLongitude": self.to_coordinate.longitude,
            "toAddress": self.place_name,
            "distance": self.distance_km,
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat() if self.end_time else None,
            "duration": self.duration_seconds,
            "checkInId": self.check_in_id,
            "checkInLatitude": self.check_in_coordinate.latitude,
            "checkInLongitude": self.check_in_coordinate.longitude,
        }


@dataclass
class TrackingState:
    """Per-session classifier state; owned by exactly one employee's stream."""

    employee_id: str
    check_in_id: str
    anchor: Coordinate
    reference_point: Coordinate
    stay_point: Coordinate
    stay_started_at: datetime
    last_sample_at: datetime
    stay_recorded: bool = False
    left_check_in_area: bool = False
