from datetime import datetime, timedelta

import pytest

from src.attendance_tracker.attendance_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceSession
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import AlreadyCheckedIn, LocationDenied, NoOpenSession
from src.attendance_tracker.attendance_tracker.geo.model import Coordinate
from src.attendance_tracker.attendance_tracker.locations.model import AllowedLocation, AttendanceCenter, LocationRestrictionPolicy

OFFICE = Coordinate(24.7136, 46.6753)
FAR_AWAY = Coordinate(24.8136, 46.6753)
T0 = datetime(2024, 5, 6, 8, 0, 0)


@pytest.fixture()
def repo():
    return InMemoryAttendanceRepository()


@pytest.fixture()
def service(repo):
    return AttendanceService(repo)


def test_check_in_opens_session(service):
    session = service.check_in("e1", OFFICE, "Head office", LocationRestrictionPolicy.anywhere(), now=T0)

    assert session.status == AttendanceStatus.CHECKED_IN
    assert session.check_in_place_name == "Head office"
    assert session.idempotency_key == f"e1_{int(T0.timestamp())}"
    assert service.get_active_session("e1") == session
    assert service.count_active() == 1


def test_second_check_in_is_rejected_but_other_employee_is_not(service):
    policy = LocationRestrictionPolicy.anywhere()
    service.check_in("e1", OFFICE, None, policy, now=T0)

    with pytest.raises(AlreadyCheckedIn):
        service.check_in("e1", OFFICE, None, policy, now=T0 + timedelta(minutes=1))

    service.check_in("e2", OFFICE, None, policy, now=T0)
    assert service.count_active() == 2


def test_check_in_outside_policy_is_denied(service):
    policy = LocationRestrictionPolicy.specific(AllowedLocation(name="HQ", coordinate=OFFICE))

    with pytest.raises(LocationDenied):
        service.check_in("e1", FAR_AWAY, None, policy, now=T0)
    assert service.get_active_session("e1") is None


def test_place_name_falls_back_to_center_then_coordinates(service):
    center = AttendanceCenter(center_id="c1", name="Central", name_en="Central Office", coordinate=OFFICE)
    policy = LocationRestrictionPolicy.anywhere()

    at_center = service.check_in("e1", OFFICE, "  ", policy, now=T0, centers=[center])
    elsewhere = service.check_in("e2", FAR_AWAY, None, policy, now=T0, centers=[center])

    assert at_center.check_in_place_name == "Central Office"
    assert elsewhere.check_in_place_name == "24.8136, 46.6753"


def test_check_out_closes_session_with_duration(service):
    service.check_in("e1", OFFICE, None, LocationRestrictionPolicy.anywhere(), now=T0)

    closed = service.check_out("e1", OFFICE, "Head office", None, now=T0 + timedelta(hours=8, minutes=30))

    assert closed.status == AttendanceStatus.CHECKED_OUT
    assert closed.total_duration_seconds == 8.5 * 3600
    assert closed.worked_hours == 8.5
    assert service.get_active_session("e1") is None


def test_check_out_before_check_in_time_yields_zero_duration(service):
    service.check_in("e1", OFFICE, None, LocationRestrictionPolicy.anywhere(), now=T0)

    closed = service.check_out("e1", OFFICE, None, None, now=T0 - timedelta(minutes=5))

    assert closed.check_out_time == T0
    assert closed.total_duration_seconds == 0


def test_check_out_without_open_session(service):
    with pytest.raises(NoOpenSession):
        service.check_out("e1", OFFICE, None, None, now=T0)


def test_check_out_is_idempotent_with_key(service, repo):
    service.check_in("e1", OFFICE, None, LocationRestrictionPolicy.anywhere(), now=T0)

    first = service.check_out("e1", OFFICE, None, None, now=T0 + timedelta(hours=1), idempotency_key="k-1")
    retry = service.check_out("e1", OFFICE, None, None, now=T0 + timedelta(hours=2), idempotency_key="k-1")

    assert retry == first
    assert retry.total_duration_seconds == 3600
    assert len(repo.get_recent_for_employee("e1", 10)) == 1


def test_check_out_outside_center_is_denied(service):
    center = AttendanceCenter(center_id="c1", name="HQ", coordinate=OFFICE, radius_meters=200)
    service.check_in("e1", OFFICE, None, LocationRestrictionPolicy.anywhere(), now=T0)

    with pytest.raises(LocationDenied):
        service.check_out("e1", FAR_AWAY, None, center, now=T0 + timedelta(hours=1))
    assert service.get_active_session("e1") is not None


def test_remote_checkout_employee_may_leave_from_anywhere(service):
    center = AttendanceCenter(center_id="c1", name="HQ", coordinate=OFFICE, remote_checkout_employee_ids=frozenset({"e1"}))
    service.check_in("e1", OFFICE, None, LocationRestrictionPolicy.anywhere(), now=T0)

    closed = service.check_out("e1", FAR_AWAY, None, center, now=T0 + timedelta(hours=1))

    assert closed.check_out_place_name == "24.8136, 46.6753"


def test_history_is_newest_first_and_limited(repo):
    service = AttendanceService(repo, history_limit=2)
    policy = LocationRestrictionPolicy.anywhere()
    for day in range(3):
        start = T0 + timedelta(days=day)
        service.check_in("e1", OFFICE, None, policy, now=start)
        service.check_out("e1", OFFICE, None, None, now=start + timedelta(hours=8))

    history = service.get_history("e1")

    assert [s.check_in_time.day for s in history] == [8, 7]
    assert len(service.get_history("e1", limit=5)) == 3


def test_session_from_dict_keeps_leave_status_and_defaults_unknown():
    doc = {
        "id": "s1",
        "employeeId": "e1",
        "checkInTime": T0.isoformat(),
        "checkInLocation": {"latitude": 24.7, "longitude": 46.6},
        "status": "on leave",
    }

    assert AttendanceSession.from_dict(doc).status == AttendanceStatus.ON_LEAVE
    assert AttendanceSession.from_dict({**doc, "status": "weird"}).status == AttendanceStatus.CHECKED_IN
