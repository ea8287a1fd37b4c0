from datetime import datetime, timedelta

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceSession
from src.attendance_tracker.attendance_tracker.core.enums import MovementType
from src.attendance_tracker.attendance_tracker.geo.model import Coordinate
from src.attendance_tracker.attendance_tracker.movements.classifier import MovementClassifier

ANCHOR = Coordinate(24.7136, 46.6753)
T0 = datetime(2024, 5, 6, 8, 0, 0)
METERS_PER_DEGREE_LAT = 111_194.93


def north(meters: float) -> Coordinate:
    return Coordinate(ANCHOR.latitude + meters / METERS_PER_DEGREE_LAT, ANCHOR.longitude)


def minutes(n: int) -> datetime:
    return T0 + timedelta(minutes=n)


def _state():
    session = AttendanceSession(session_id="s1", employee_id="e1", check_in_time=T0, check_in_coordinate=ANCHOR)
    classifier = MovementClassifier()
    return classifier, classifier.start(session)


def types(events):
    return [e.movement_type for e in events]


def test_staying_near_anchor_records_one_stay_from_check_in():
    classifier, state = _state()

    emitted = []
    for m, meters in [(5, 10), (10, 25), (16, 40), (20, 30)]:
        emitted += classifier.classify(state, north(meters), at=minutes(m))

    assert types(emitted) == [MovementType.STATIONARY_STAY]
    stay = emitted[0]
    assert stay.start_time == T0
    assert stay.end_time == minutes(16)
    assert stay.duration_seconds >= 15 * 60
    assert stay.check_in_id == "s1"


def test_short_stay_is_not_recorded():
    classifier, state = _state()

    assert classifier.classify(state, north(10), at=minutes(14)) == []


def test_leaving_and_returning_to_check_in_area():
    classifier, state = _state()

    away = classifier.classify(state, north(1200), at=minutes(5))
    back = classifier.classify(state, north(5), at=minutes(30))

    assert types(away) == [MovementType.SIGNIFICANT_MOVE, MovementType.LEFT_CHECKIN_AREA]
    assert 1.19 < away[1].distance_km < 1.21
    assert MovementType.RETURNED_TO_CHECKIN in types(back)
    assert MovementType.LEFT_CHECKIN_AREA not in types(back)


def test_left_area_is_emitted_once_while_away():
    classifier, state = _state()

    first = classifier.classify(state, north(1200), at=minutes(5))
    second = classifier.classify(state, north(1500), at=minutes(6))

    assert MovementType.LEFT_CHECKIN_AREA in types(first)
    assert MovementType.LEFT_CHECKIN_AREA not in types(second)
    assert MovementType.SIGNIFICANT_MOVE not in types(second)


def test_significant_move_measured_from_last_reference_point():
    classifier, state = _state()

    classifier.classify(state, north(1100), at=minutes(5))
    events = classifier.classify(state, north(2200), at=minutes(10))

    assert types(events) == [MovementType.SIGNIFICANT_MOVE]
    assert events[0].from_coordinate == north(1100)


def test_out_of_order_and_duplicate_samples_are_dropped():
    classifier, state = _state()
    classifier.classify(state, north(10), at=minutes(10))

    assert classifier.classify(state, north(1500), at=minutes(5)) == []
    assert classifier.classify(state, north(1500), at=minutes(10)) == []
    assert state.left_check_in_area is False


def test_sample_timestamp_is_used_when_no_time_given():
    classifier, state = _state()
    sample = Coordinate(north(1200).latitude, ANCHOR.longitude, captured_at=minutes(3))

    events = classifier.classify(state, sample)

    assert all(e.start_time == minutes(3) for e in events)
    assert classifier.classify(state, north(1200)) == []
