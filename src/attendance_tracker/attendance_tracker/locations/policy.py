from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..geo.distance import distance_meters, is_within_radius
from ..geo.model import Coordinate
from .factory import RestrictionStrategyFactory
from .model import AttendanceCenter, LocationRestrictionPolicy

logger = logging.getLogger(__name__)


class LocationPolicyEngine:
    """Decides whether a coordinate satisfies check-in / check-out restrictions."""

    def __init__(self, *, strategy_factory: RestrictionStrategyFactory | None = None):
        self._factory = strategy_factory or RestrictionStrategyFactory()

    def is_check_in_allowed(self, employee_id: str, coordinate: Coordinate, policy: LocationRestrictionPolicy) -> bool:
        strategy = self._factory.for_policy(employee_id=employee_id, policy=policy)
        decision = strategy.evaluate(employee_id=employee_id, coordinate=coordinate, policy=policy)
        logger.debug(
            "check-in policy=%s employee=%s allowed=%s distance=%s",
            policy.restriction_type.value,
            employee_id,
            decision.allowed,
            decision.distance_meters,
        )
        return decision.allowed

    def is_check_out_allowed(self, employee_id: str, coordinate: Coordinate, center: AttendanceCenter) -> bool:
        if center.can_check_out_remotely(employee_id):
            logger.debug("remote checkout allowed at center=%s for employee=%s", center.center_id, employee_id)
            return True

        distance = distance_meters(coordinate, center.coordinate)
        allowed = distance <= center.radius_meters
        logger.debug(
            "check-out center=%s employee=%s distance=%.1fm radius=%.1fm allowed=%s",
            center.center_id,
            employee_id,
            distance,
            center.radius_meters,
            allowed,
        )
        return allowed

    def match_center(
        self,
        employee_id: str,
        coordinate: Coordinate,
        centers: Iterable[AttendanceCenter],
    ) -> Optional[AttendanceCenter]:
        """First active center assigned to the employee whose geofence contains the coordinate."""
        for center in centers:
            if not center.is_active or not center.is_assigned(employee_id):
                continue
            if is_within_radius(coordinate, center.coordinate, center.radius_meters):
                return center
        return None
