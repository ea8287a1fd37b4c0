from src.attendance_tracker.attendance_tracker.core.enums import LocationRestrictionType
from src.attendance_tracker.attendance_tracker.geo.model import Coordinate
from src.attendance_tracker.attendance_tracker.locations.factory import RestrictionStrategyFactory
from src.attendance_tracker.attendance_tracker.locations.model import AllowedLocation, LocationRestrictionPolicy
from src.attendance_tracker.attendance_tracker.locations.strategies.anywhere_strategy import AnywhereRestriction
from src.attendance_tracker.attendance_tracker.locations.strategies.geofence_strategy import MultipleLocationsRestriction, SpecificLocationRestriction

HQ = AllowedLocation(name="HQ", coordinate=Coordinate(24.7136, 46.6753))


def test_factory_picks_strategy_by_restriction_type():
    factory = RestrictionStrategyFactory()

    assert isinstance(factory.for_policy(employee_id="e1", policy=LocationRestrictionPolicy.anywhere()), AnywhereRestriction)
    assert isinstance(factory.for_policy(employee_id="e1", policy=LocationRestrictionPolicy.specific(HQ)), SpecificLocationRestriction)
    assert isinstance(factory.for_policy(employee_id="e1", policy=LocationRestrictionPolicy.multiple([HQ])), MultipleLocationsRestriction)


def test_inactive_or_non_applicable_policy_is_unrestricted():
    factory = RestrictionStrategyFactory()
    inactive = LocationRestrictionPolicy.specific(HQ, is_active=False)
    for_others = LocationRestrictionPolicy.specific(HQ, applicable_employee_ids=frozenset({"e2"}))

    assert isinstance(factory.for_policy(employee_id="e1", policy=inactive), AnywhereRestriction)
    assert isinstance(factory.for_policy(employee_id="e1", policy=for_others), AnywhereRestriction)
    assert isinstance(factory.for_policy(employee_id="e2", policy=for_others), SpecificLocationRestriction)


def test_specific_only_considers_first_location():
    far = AllowedLocation(name="Far", coordinate=Coordinate(25.5, 47.5))
    policy = LocationRestrictionPolicy(
        restriction_type=LocationRestrictionType.SPECIFIC,
        allowed_locations=(HQ, far),
    )

    decision = SpecificLocationRestriction().evaluate(employee_id="e1", coordinate=far.coordinate, policy=policy)
    multi = MultipleLocationsRestriction().evaluate(employee_id="e1", coordinate=far.coordinate, policy=policy)

    assert not decision.allowed
    assert multi.allowed
    assert multi.matched_location == far
