from __future__ import annotations

from ...geo.model import Coordinate
from ..model import LocationRestrictionPolicy
from .base import RestrictionDecision, RestrictionStrategy


class AnywhereRestriction(RestrictionStrategy):
    """No restriction: check-in is allowed from any coordinate."""

    def evaluate(self, *, employee_id: str, coordinate: Coordinate, policy: LocationRestrictionPolicy) -> RestrictionDecision:
        return RestrictionDecision(allowed=True)
