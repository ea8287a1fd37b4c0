from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...geo.model import Coordinate
from ..model import AllowedLocation, LocationRestrictionPolicy


@dataclass(frozen=True)
class RestrictionDecision:
    allowed: bool
    matched_location: Optional[AllowedLocation] = None
    distance_meters: Optional[float] = None


class RestrictionStrategy(ABC):
    """Strategy Pattern: encapsulate how one restriction type admits a check-in."""

    @abstractmethod
    def evaluate(self, *, employee_id: str, coordinate: Coordinate, policy: LocationRestrictionPolicy) -> RestrictionDecision:
        raise NotImplementedError
