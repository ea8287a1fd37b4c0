from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LocationRestrictionType
from .model import LocationRestrictionPolicy
from .strategies.anywhere_strategy import AnywhereRestriction
from .strategies.base import RestrictionStrategy
from .strategies.geofence_strategy import MultipleLocationsRestriction, SpecificLocationRestriction


@dataclass
class RestrictionStrategyFactory:
    """Factory Pattern: choose the restriction strategy for a policy."""

    def for_policy(self, *, employee_id: str, policy: LocationRestrictionPolicy) -> RestrictionStrategy:
        if not policy.is_active or not policy.applies_to(employee_id):
            return AnywhereRestriction()

        if policy.restriction_type == LocationRestrictionType.SPECIFIC:
            return SpecificLocationRestriction()
        if policy.restriction_type == LocationRestrictionType.MULTIPLE:
            return MultipleLocationsRestriction()
        return AnywhereRestriction()
