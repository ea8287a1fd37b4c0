from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .analytics.service import AnalyticsAggregator
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.locks import KeyedLock
from .core import constants
from .leaves.memory_leave_repository import InMemoryLeaveRepository
from .leaves.service import LeaveBalanceLedger
from .locations.factory import RestrictionStrategyFactory
from .locations.memory_location_repository import InMemoryLocationRepository
from .locations.policy import LocationPolicyEngine
from .movements.classifier import MovementClassifier
from .movements.memory_movement_repository import InMemoryMovementRepository
from .movements.service import MovementService
from .shifts.memory_shift_repository import InMemoryShiftRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    locations_repo: InMemoryLocationRepository
    attendance_repo: InMemoryAttendanceRepository
    movements_repo: InMemoryMovementRepository
    leaves_repo: InMemoryLeaveRepository
    shifts_repo: InMemoryShiftRepository

    policy_engine: LocationPolicyEngine
    attendance_service: AttendanceService
    movement_service: MovementService
    leave_ledger: LeaveBalanceLedger
    shift_service: ShiftService
    analytics: AnalyticsAggregator

    default_center_radius_meters: float


def build_container(*, settings: Optional[ModuleType] = None) -> Container:
    def setting(name: str, default):
        return getattr(settings, name, default) if settings is not None else default

    locks = KeyedLock()

    locations_repo = InMemoryLocationRepository()
    attendance_repo = InMemoryAttendanceRepository()
    movements_repo = InMemoryMovementRepository()
    leaves_repo = InMemoryLeaveRepository()
    shifts_repo = InMemoryShiftRepository()

    policy_engine = LocationPolicyEngine(strategy_factory=RestrictionStrategyFactory())
    attendance_service = AttendanceService(
        attendance_repo,
        policy_engine=policy_engine,
        locks=locks,
        history_limit=int(setting("DEFAULT_HISTORY_LIMIT", constants.DEFAULT_HISTORY_LIMIT)),
    )
    classifier = MovementClassifier(
        significant_move_km=float(setting("SIGNIFICANT_MOVE_KM", constants.SIGNIFICANT_MOVE_KM)),
        stationary_dwell_minutes=float(setting("STATIONARY_DWELL_MINUTES", constants.STATIONARY_DWELL_MINUTES)),
        stationary_radius_meters=float(setting("STATIONARY_RADIUS_METERS", constants.STATIONARY_RADIUS_METERS)),
    )
    movement_service = MovementService(attendance_repo, movements_repo, classifier=classifier, locks=locks)
    leave_ledger = LeaveBalanceLedger(leaves_repo, locks=locks)

    return Container(
        locations_repo=locations_repo,
        attendance_repo=attendance_repo,
        movements_repo=movements_repo,
        leaves_repo=leaves_repo,
        shifts_repo=shifts_repo,
        policy_engine=policy_engine,
        attendance_service=attendance_service,
        movement_service=movement_service,
        leave_ledger=leave_ledger,
        shift_service=ShiftService(shifts_repo),
        analytics=AnalyticsAggregator(),
        default_center_radius_meters=float(
            setting("DEFAULT_CENTER_RADIUS_METERS", constants.DEFAULT_CENTER_RADIUS_METERS)
        ),
    )
