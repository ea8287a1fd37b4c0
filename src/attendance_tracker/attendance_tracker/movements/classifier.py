"""Classify a time-ordered stream of location samples into movement events.

Each sample is compared against three points: the check-in anchor, the last
reference point (moved on every significant move) and the start of the current
stay. Thresholds are inclusive.

A STATIONARY_STAY is emitted once per stay, on the first sample at which the
dwell time reaches the threshold. Its end is that triggering sample, not the
last sample before the employee moves on.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta
from typing import Optional

from ..attendance.model import AttendanceSession
from ..common.datetime_utils import to_local_naive
from ..core.constants import SIGNIFICANT_MOVE_KM, STATIONARY_DWELL_MINUTES, STATIONARY_RADIUS_METERS
from ..core.enums import MovementType
from ..geo.distance import distance_meters
from ..geo.model import Coordinate
from .model import MovementEvent, TrackingState

logger = logging.getLogger(__name__)


class MovementClassifier:
    def __init__(
        self,
        *,
        significant_move_km: float = SIGNIFICANT_MOVE_KM,
        stationary_dwell_minutes: float = STATIONARY_DWELL_MINUTES,
        stationary_radius_meters: float = STATIONARY_RADIUS_METERS,
    ):
        self._move_meters = float(significant_move_km) * 1000.0
        self._dwell = timedelta(minutes=float(stationary_dwell_minutes))
        self._stay_radius = float(stationary_radius_meters)

    def start(self, session: AttendanceSession) -> TrackingState:
        anchor = session.check_in_coordinate
        return TrackingState(
            employee_id=session.employee_id,
            check_in_id=session.session_id,
            anchor=anchor,
            reference_point=anchor,
            stay_point=anchor,
            stay_started_at=session.check_in_time,
            last_sample_at=session.check_in_time,
        )

    def classify(
        self,
        state: TrackingState,
        sample: Coordinate,
        *,
        at: Optional[datetime] = None,
        place_name: Optional[str] = None,
    ) -> list[MovementEvent]:
        at = at or sample.captured_at
        if at is not None:
            at = to_local_naive(at)
        if at is None or at <= state.last_sample_at:
            return []
        state.last_sample_at = at

        events: list[MovementEvent] = []

        from_stay = distance_meters(state.stay_point, sample)
        if from_stay < self._stay_radius:
            if not state.stay_recorded and at - state.stay_started_at >= self._dwell:
                events.append(
                    self._event(
                        state,
                        MovementType.STATIONARY_STAY,
                        state.stay_point,
                        sample,
                        from_stay,
                        start=state.stay_started_at,
                        end=at,
                        place_name=place_name,
                    )
                )
                state.stay_recorded = True
        else:
            state.stay_point = sample
            state.stay_started_at = at
            state.stay_recorded = False

        from_reference = distance_meters(state.reference_point, sample)
        if from_reference >= self._move_meters:
            events.append(
                self._event(
                    state,
                    MovementType.SIGNIFICANT_MOVE,
                    state.reference_point,
                    sample,
                    from_reference,
                    start=at,
                    place_name=place_name,
                )
            )
            state.reference_point = sample

        from_anchor = distance_meters(state.anchor, sample)
        if not state.left_check_in_area and from_anchor >= self._move_meters:
            events.append(
                self._event(state, MovementType.LEFT_CHECKIN_AREA, state.anchor, sample, from_anchor, start=at, place_name=place_name)
            )
            state.left_check_in_area = True
        elif state.left_check_in_area and from_anchor < self._move_meters:
            events.append(
                self._event(state, MovementType.RETURNED_TO_CHECKIN, state.anchor, sample, from_anchor, start=at, place_name=place_name)
            )
            state.left_check_in_area = False

        for e in events:
            logger.info("%s for %s (%.3f km)", e.movement_type.value, e.employee_id, e.distance_km)
        return events

    @staticmethod
    def _event(
        state: TrackingState,
        movement_type: MovementType,
        origin: Coordinate,
        target: Coordinate,
        meters: float,
        *,
        start: datetime,
        end: Optional[datetime] = None,
        place_name: Optional[str] = None,
    ) -> MovementEvent:
        return MovementEvent(
            event_id=uuid.uuid4().hex,
            employee_id=state.employee_id,
            movement_type=movement_type,
            from_coordinate=origin,
            to_coordinate=target,
            distance_km=meters / 1000.0,
            start_time=start,
            end_time=end,
            duration_seconds=(end - start).total_seconds() if end else None,
            check_in_id=state.check_in_id,
            check_in_coordinate=state.anchor,
            place_name=place_name,
        )
