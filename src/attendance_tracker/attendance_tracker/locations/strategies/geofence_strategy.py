from __future__ import annotations

from typing import Sequence

from ...geo.distance import distance_meters
from ...geo.model import Coordinate
from ..model import AllowedLocation, LocationRestrictionPolicy
from .base import RestrictionDecision, RestrictionStrategy


def _first_match(employee_id: str, coordinate: Coordinate, locations: Sequence[AllowedLocation]) -> RestrictionDecision:
    nearest = None
    for location in locations:
        if not location.applies_to(employee_id):
            continue
        distance = distance_meters(coordinate, location.coordinate)
        if distance <= location.radius_meters:
            return RestrictionDecision(allowed=True, matched_location=location, distance_meters=distance)
        if nearest is None or distance < nearest:
            nearest = distance
    return RestrictionDecision(allowed=False, distance_meters=nearest)


class SpecificLocationRestriction(RestrictionStrategy):
    """Only the first allowed location of the policy is considered."""

    def evaluate(self, *, employee_id: str, coordinate: Coordinate, policy: LocationRestrictionPolicy) -> RestrictionDecision:
        return _first_match(employee_id, coordinate, policy.allowed_locations[:1])


class MultipleLocationsRestriction(RestrictionStrategy):
    """Allowed when inside any one of the allowed locations."""

    def evaluate(self, *, employee_id: str, coordinate: Coordinate, policy: LocationRestrictionPolicy) -> RestrictionDecision:
        return _first_match(employee_id, coordinate, policy.allowed_locations)
