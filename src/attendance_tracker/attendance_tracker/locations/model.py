from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from ..common.formatting import localized_name
from ..common.validators import require_positive
from ..core.constants import DEFAULT_ALLOWED_LOCATION_RADIUS_METERS, DEFAULT_CENTER_RADIUS_METERS
from ..core.enums import LocationRestrictionType
from ..geo.model import Coordinate


@dataclass(frozen=True)
class AttendanceCenter:
    """Geofenced site employees check in and out at."""

    center_id: str
    name: str
    coordinate: Coordinate
    radius_meters: float = DEFAULT_CENTER_RADIUS_METERS
    assigned_employee_ids: FrozenSet[str] = frozenset()
    allow_remote_checkout: bool = False
    remote_checkout_employee_ids: FrozenSet[str] = frozenset()
    is_active: bool = True
    address: str = ""
    name_en: Optional[str] = None
    name_ar: Optional[str] = None

    def __post_init__(self):
        require_positive(self.radius_meters, "Center radius")

    def is_assigned(self, employee_id: str) -> bool:
        return not self.assigned_employee_ids or employee_id in self.assigned_employee_ids

    def can_check_out_remotely(self, employee_id: str) -> bool:
        return self.allow_remote_checkout or employee_id in self.remote_checkout_employee_ids

    def display_name(self, *, is_arabic: bool = False) -> str:
        return localized_name(self.name, name_en=self.name_en, name_ar=self.name_ar, is_arabic=is_arabic)


@dataclass(frozen=True)
class AllowedLocation:
    name: str
    coordinate: Coordinate
    radius_meters: float = DEFAULT_ALLOWED_LOCATION_RADIUS_METERS
    applicable_employee_ids: FrozenSet[str] = frozenset()
    address: str = ""

    def __post_init__(self):
        require_positive(self.radius_meters, "Allowed location radius")

    def applies_to(self, employee_id: str) -> bool:
        """An empty set means the location applies to every employee."""
        return not self.applicable_employee_ids or employee_id in self.applicable_employee_ids


@dataclass(frozen=True)
class LocationRestrictionPolicy:
    restriction_type: LocationRestrictionType = LocationRestrictionType.ANYWHERE
    allowed_locations: Tuple[AllowedLocation, ...] = field(default_factory=tuple)
    applicable_employee_ids: FrozenSet[str] = frozenset()
    name: str = "Check-In Policy"
    is_active: bool = True

    def applies_to(self, employee_id: str) -> bool:
        return not self.applicable_employee_ids or employee_id in self.applicable_employee_ids

    @classmethod
    def anywhere(cls) -> "LocationRestrictionPolicy":
        return cls(restriction_type=LocationRestrictionType.ANYWHERE)

    @classmethod
    def specific(cls, location: AllowedLocation, **kwargs) -> "LocationRestrictionPolicy":
        return cls(restriction_type=LocationRestrictionType.SPECIFIC, allowed_locations=(location,), **kwargs)

    @classmethod
    def multiple(cls, locations, **kwargs) -> "LocationRestrictionPolicy":
        return cls(restriction_type=LocationRestrictionType.MULTIPLE, allowed_locations=tuple(locations), **kwargs)
