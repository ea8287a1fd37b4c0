from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceCenter, LocationRestrictionPolicy


class LocationRepository(Protocol):
    def get_policy(self) -> LocationRestrictionPolicy:
        raise NotImplementedError

    def save_policy(self, policy: LocationRestrictionPolicy) -> None:
        raise NotImplementedError

    def get_center(self, center_id: str) -> Optional[AttendanceCenter]:
        raise NotImplementedError

    def list_centers(self, *, active_only: bool = False) -> Sequence[AttendanceCenter]:
        raise NotImplementedError

    def save_center(self, center: AttendanceCenter) -> None:
        raise NotImplementedError
