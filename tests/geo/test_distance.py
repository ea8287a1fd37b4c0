import math

from src.attendance_tracker.attendance_tracker.geo.distance import distance_km, distance_meters, is_within_radius
from src.attendance_tracker.attendance_tracker.geo.model import Coordinate

RIYADH = Coordinate(24.7136, 46.6753)
JEDDAH = Coordinate(21.4858, 39.1925)


def test_distance_is_symmetric():
    assert distance_meters(RIYADH, JEDDAH) == distance_meters(JEDDAH, RIYADH)


def test_distance_to_self_is_zero():
    assert distance_meters(RIYADH, RIYADH) == 0.0
    assert distance_meters(RIYADH, Coordinate(24.7136, 46.6753, accuracy=5.0)) == 0.0


def test_distance_riyadh_jeddah_is_about_850_km():
    assert 820 < distance_km(RIYADH, JEDDAH) < 880


def test_one_degree_of_latitude():
    a = Coordinate(0.0, 0.0)
    b = Coordinate(1.0, 0.0)
    assert math.isclose(distance_meters(a, b), 6_371_000 * math.pi / 180, rel_tol=1e-9)


def test_within_radius_boundary_is_inclusive():
    point = Coordinate(24.7146, 46.6753)
    radius = distance_meters(point, RIYADH)

    assert is_within_radius(point, RIYADH, radius)
    assert not is_within_radius(point, RIYADH, radius - 0.01)


def test_near_antipodal_points_never_fail():
    half_circumference = math.pi * 6_371_000

    for lat in range(-89, 90):
        d = distance_meters(Coordinate(float(lat), 0.0), Coordinate(float(-lat), 180.0))
        assert math.isclose(d, half_circumference, rel_tol=1e-6)

    assert math.isclose(distance_meters(Coordinate(-82.0, 0.0), Coordinate(82.0, 180.0)), half_circumference, rel_tol=1e-6)
