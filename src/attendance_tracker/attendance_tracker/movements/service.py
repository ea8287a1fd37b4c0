from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, to_local_naive
from ..common.locks import KeyedLock
from ..geo.model import Coordinate
from .classifier import MovementClassifier
from .model import MovementEvent, TrackingState
from .repository import MovementRepository

logger = logging.getLogger(__name__)


class MovementService:
    """Feeds location samples of checked-in employees through the classifier.

    Tracking is observational: samples for an employee without an open session
    are ignored rather than rejected.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        movements: MovementRepository,
        *,
        classifier: MovementClassifier | None = None,
        locks: KeyedLock | None = None,
    ):
        self._attendance = attendance
        self._movements = movements
        self._classifier = classifier or MovementClassifier()
        self._locks = locks or KeyedLock()
        self._states: dict[str, TrackingState] = {}

    def record_sample(
        self,
        employee_id: str,
        sample: Coordinate,
        *,
        place_name: Optional[str] = None,
        now: datetime | None = None,
    ) -> list[MovementEvent]:
        at = to_local_naive(sample.captured_at or now or now_local())

        with self._locks.hold(employee_id):
            session = self._attendance.get_open_for_employee(employee_id)
            if session is None:
                self._states.pop(employee_id, None)
                logger.debug("Ignoring sample for %s: no open session", employee_id)
                return []

            state = self._states.get(employee_id)
            if state is None or state.check_in_id != session.session_id:
                state = self._classifier.start(session)
                self._states[employee_id] = state

            events = self._classifier.classify(state, sample, at=at, place_name=place_name)
            for event in events:
                self._movements.append(event)
        return events

    def stop_tracking(self, employee_id: str) -> None:
        with self._locks.hold(employee_id):
            self._states.pop(employee_id, None)

    def list_events(self, employee_id: str, *, check_in_id: Optional[str] = None) -> Sequence[MovementEvent]:
        return self._movements.list_for_employee(employee_id, check_in_id=check_in_id)
