from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import AttendanceStatus
from ..geo.model import Coordinate


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: one check-in/check-out cycle of an employee.

    Created on check-in and replaced exactly once on check-out; closed sessions
    are never edited again. ``assigned_status`` carries ON_LEAVE / ABSENT values
    set outside the check-in/check-out flow.
    """

    session_id: str
    employee_id: str
    check_in_time: datetime
    check_in_coordinate: Coordinate
    check_in_place_name: Optional[str] = None
    check_out_time: Optional[datetime] = None
    check_out_coordinate: Optional[Coordinate] = None
    check_out_place_name: Optional[str] = None
    total_duration_seconds: Optional[float] = None
    idempotency_key: Optional[str] = None
    checkout_idempotency_key: Optional[str] = None
    assigned_status: Optional[AttendanceStatus] = None

    @property
    def status(self) -> AttendanceStatus:
        if self.assigned_status in (AttendanceStatus.ON_LEAVE, AttendanceStatus.ABSENT):
            return self.assigned_status
        if self.check_out_time is not None:
            return AttendanceStatus.CHECKED_OUT
        return AttendanceStatus.CHECKED_IN

    @property
    def is_open(self) -> bool:
        return self.status == AttendanceStatus.CHECKED_IN

    @property
    def duration_seconds(self) -> float:
        return float(self.total_duration_seconds or 0)

    @property
    def worked_hours(self) -> float:
        return self.duration_seconds / 3600.0

    def to_dict(self) -> dict:
        return {
            "id": self.session_id,
            "employeeId": self.employee_id,
            "checkInTime": self.check_in_time.isoformat(),
            "checkInLocation": self.check_in_coordinate.to_dict(),
            "checkInPlaceName": self.check_in_place_name,
            "checkOutTime": self.check_out_time.isoformat() if self.check_out_time else None,
            "checkOutLocation": self.check_out_coordinate.to_dict() if self.check_out_coordinate else None,
            "checkOutPlaceName": self.check_out_place_name,
            "totalDuration": self.total_duration_seconds,
            "status": self.status.value,
            "idempotencyKey": self.idempotency_key,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceSession":
        """Build a session from the database collaborator's document shape."""
        status = AttendanceStatus.from_value(data.get("status"))
        check_out = data.get("checkOutTime")
        check_out_location = data.get("checkOutLocation")
        return cls(
            session_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            check_in_time=parse_iso_datetime(data["checkInTime"]),
            check_in_coordinate=Coordinate.from_dict(data["checkInLocation"]),
            check_in_place_name=data.get("checkInPlaceName"),
            check_out_time=parse_iso_datetime(check_out) if check_out else None,
            check_out_coordinate=Coordinate.from_dict(check_out_location) if check_out_location else None,
            check_out_place_name=data.get("checkOutPlaceName"),
            total_duration_seconds=data.get("totalDuration"),
            idempotency_key=data.get("idempotencyKey"),
            assigned_status=status if status in (AttendanceStatus.ON_LEAVE, AttendanceStatus.ABSENT) else None,
        )
