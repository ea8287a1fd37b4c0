from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, to_local_naive
from ..common.formatting import coordinate_label, format_duration
from ..common.locks import KeyedLock
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import AlreadyCheckedIn, LocationDenied, NoOpenSession
from ..geo.model import Coordinate
from ..locations.model import AttendanceCenter, LocationRestrictionPolicy
from ..locations.policy import LocationPolicyEngine
from .model import AttendanceSession
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in -> checked-in -> check-out lifecycle, one open session per employee."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        policy_engine: LocationPolicyEngine | None = None,
        locks: KeyedLock | None = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._attendance = attendance
        self._policy = policy_engine or LocationPolicyEngine()
        self._locks = locks or KeyedLock()
        self._history_limit = int(history_limit)

    def _resolve_place_name(
        self,
        employee_id: str,
        coordinate: Coordinate,
        place_name: Optional[str],
        centers: Optional[Sequence[AttendanceCenter]],
    ) -> str:
        if place_name and place_name.strip():
            return place_name.strip()
        if centers:
            center = self._policy.match_center(employee_id, coordinate, centers)
            if center:
                return center.display_name()
        return coordinate_label(coordinate)

    def check_in(
        self,
        employee_id: str,
        coordinate: Coordinate,
        place_name: Optional[str],
        policy: LocationRestrictionPolicy,
        *,
        now: datetime | None = None,
        centers: Optional[Sequence[AttendanceCenter]] = None,
    ) -> AttendanceSession:
        now = to_local_naive(now) if now else now_local()

        with self._locks.hold(employee_id):
            if not self._policy.is_check_in_allowed(employee_id, coordinate, policy):
                logger.warning("Check-in denied for %s at %s", employee_id, coordinate_label(coordinate))
                raise LocationDenied("You are not within an authorized check-in location")

            if self._attendance.get_open_for_employee(employee_id):
                raise AlreadyCheckedIn("Already checked in. Please check out first.")

            session = AttendanceSession(
                session_id=uuid.uuid4().hex,
                employee_id=employee_id,
                check_in_time=now,
                check_in_coordinate=coordinate,
                check_in_place_name=self._resolve_place_name(employee_id, coordinate, place_name, centers),
                idempotency_key=f"{employee_id}_{int(now.timestamp())}",
            )
            self._attendance.create(session)

        logger.info("Check-in %s for %s at %s", session.session_id, employee_id, session.check_in_place_name)
        return session

    def check_out(
        self,
        employee_id: str,
        coordinate: Coordinate,
        place_name: Optional[str],
        center: Optional[AttendanceCenter],
        *,
        now: datetime | None = None,
        idempotency_key: Optional[str] = None,
    ) -> AttendanceSession:
        """Close the open session.

        A retried request carrying the idempotency key that already closed a
        session gets that session back unchanged. ``center=None`` means no
        center restriction is configured for the employee.
        """
        now = to_local_naive(now) if now else now_local()

        with self._locks.hold(employee_id):
            if idempotency_key:
                done = self._attendance.find_by_checkout_key(employee_id, idempotency_key)
                if done is not None:
                    logger.info("Check-out retry for %s returned session %s", employee_id, done.session_id)
                    return done

            session = self._attendance.get_open_for_employee(employee_id)
            if session is None:
                raise NoOpenSession("No active check-in found")

            if center is not None and not self._policy.is_check_out_allowed(employee_id, coordinate, center):
                logger.warning("Check-out denied for %s outside center %s", employee_id, center.center_id)
                raise LocationDenied("You must be at your attendance center to check out")

            check_out_time = max(now, session.check_in_time)
            closed = replace(
                session,
                check_out_time=check_out_time,
                check_out_coordinate=coordinate,
                check_out_place_name=(place_name or "").strip() or coordinate_label(coordinate),
                total_duration_seconds=max((check_out_time - session.check_in_time).total_seconds(), 0.0),
                checkout_idempotency_key=idempotency_key,
            )
            if not self._attendance.close(closed):
                raise NoOpenSession("Session was already checked out")

        logger.info(
            "Check-out %s for %s after %s",
            closed.session_id,
            employee_id,
            format_duration(closed.total_duration_seconds),
        )
        return closed

    def get_active_session(self, employee_id: str) -> Optional[AttendanceSession]:
        return self._attendance.get_open_for_employee(employee_id)

    def get_history(self, employee_id: str, *, limit: int | None = None) -> Sequence[AttendanceSession]:
        return self._attendance.get_recent_for_employee(employee_id, limit or self._history_limit)

    def list_sessions_between(self, *, start: datetime, end: datetime) -> Sequence[AttendanceSession]:
        return self._attendance.list_between(start=start, end=end)

    def count_active(self) -> int:
        return self._attendance.count_open()
