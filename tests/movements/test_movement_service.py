from datetime import datetime, timedelta

from src.attendance_tracker.attendance_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus, MovementType
from src.attendance_tracker.attendance_tracker.geo.model import Coordinate
from src.attendance_tracker.attendance_tracker.locations.model import LocationRestrictionPolicy
from src.attendance_tracker.attendance_tracker.movements.memory_movement_repository import InMemoryMovementRepository
from src.attendance_tracker.attendance_tracker.movements.service import MovementService

ANCHOR = Coordinate(24.7136, 46.6753)
T0 = datetime(2024, 5, 6, 8, 0, 0)
METERS_PER_DEGREE_LAT = 111_194.93


def north(meters: float) -> Coordinate:
    return Coordinate(ANCHOR.latitude + meters / METERS_PER_DEGREE_LAT, ANCHOR.longitude)


def _services():
    attendance_repo = InMemoryAttendanceRepository()
    attendance = AttendanceService(attendance_repo)
    movements = MovementService(attendance_repo, InMemoryMovementRepository())
    return attendance, movements


def test_samples_without_open_session_are_ignored():
    _, movements = _services()

    assert movements.record_sample("e1", north(2000), now=T0) == []
    assert list(movements.list_events("e1")) == []


def test_check_in_stay_and_check_out_flow():
    attendance, movements = _services()
    session = attendance.check_in("e1", ANCHOR, "Head office", LocationRestrictionPolicy.anywhere(), now=T0)

    events = movements.record_sample("e1", north(40), now=T0 + timedelta(minutes=16))
    closed = attendance.check_out("e1", ANCHOR, None, None, now=T0 + timedelta(minutes=20))
    movements.stop_tracking("e1")

    assert [e.movement_type for e in events] == [MovementType.STATIONARY_STAY]
    assert events[0].duration_seconds >= 900
    assert closed.total_duration_seconds == 1200
    assert closed.status == AttendanceStatus.CHECKED_OUT
    assert list(movements.list_events("e1", check_in_id=session.session_id)) == events
    assert movements.record_sample("e1", north(2000), now=T0 + timedelta(minutes=25)) == []


def test_new_session_restarts_tracking():
    attendance, movements = _services()
    policy = LocationRestrictionPolicy.anywhere()

    first = attendance.check_in("e1", ANCHOR, None, policy, now=T0)
    movements.record_sample("e1", north(1500), now=T0 + timedelta(minutes=5))
    attendance.check_out("e1", ANCHOR, None, None, now=T0 + timedelta(hours=1))

    second = attendance.check_in("e1", north(1500), None, policy, now=T0 + timedelta(hours=2))
    events = movements.record_sample("e1", north(1510), now=T0 + timedelta(hours=2, minutes=5))

    assert events == []
    assert {e.check_in_id for e in movements.list_events("e1")} == {first.session_id}
    assert list(movements.list_events("e1", check_in_id=second.session_id)) == []


def test_employees_are_tracked_independently():
    attendance, movements = _services()
    policy = LocationRestrictionPolicy.anywhere()
    attendance.check_in("e1", ANCHOR, None, policy, now=T0)
    attendance.check_in("e2", ANCHOR, None, policy, now=T0)

    moved = movements.record_sample("e1", north(1200), now=T0 + timedelta(minutes=1))
    still = movements.record_sample("e2", north(10), now=T0 + timedelta(minutes=1))

    assert MovementType.LEFT_CHECKIN_AREA in [e.movement_type for e in moved]
    assert still == []
