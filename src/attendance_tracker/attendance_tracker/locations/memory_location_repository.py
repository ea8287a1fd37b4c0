from __future__ import annotations

from typing import Optional, Sequence

from .model import AttendanceCenter, LocationRestrictionPolicy


class InMemoryLocationRepository:
    def __init__(self, *, policy: LocationRestrictionPolicy | None = None, centers: Sequence[AttendanceCenter] = ()):
        self._policy = policy or LocationRestrictionPolicy.anywhere()
        self._centers: dict[str, AttendanceCenter] = {c.center_id: c for c in centers}

    def get_policy(self) -> LocationRestrictionPolicy:
        return self._policy

    def save_policy(self, policy: LocationRestrictionPolicy) -> None:
        self._policy = policy

    def get_center(self, center_id: str) -> Optional[AttendanceCenter]:
        return self._centers.get(center_id)

    def list_centers(self, *, active_only: bool = False) -> Sequence[AttendanceCenter]:
        centers = list(self._centers.values())
        if active_only:
            centers = [c for c in centers if c.is_active]
        return centers

    def save_center(self, center: AttendanceCenter) -> None:
        self._centers[center.center_id] = center
