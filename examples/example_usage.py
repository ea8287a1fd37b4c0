"""Example: drive the service layer directly (no Flask).

Checks an employee in, feeds a couple of location samples and checks out.
"""

import importlib
from datetime import datetime, timedelta

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.formatting import format_duration
from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.geo.model import Coordinate


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    office = Coordinate(24.7136, 46.6753)
    start = datetime(2024, 5, 6, 8, 0)
    policy = container.locations_repo.get_policy()

    session = container.attendance_service.check_in("emp-1", office, "Head office", policy, now=start)
    for minutes, lat in [(10, 24.7139), (40, 24.7246)]:
        sample = Coordinate(lat, office.longitude, captured_at=start + timedelta(minutes=minutes))
        for event in container.movement_service.record_sample("emp-1", sample):
            print(event.movement_type.value, event.formatted_distance())

    closed = container.attendance_service.check_out("emp-1", office, None, None, now=start + timedelta(hours=8))
    print(session.session_id, closed.status.value, format_duration(closed.total_duration_seconds))


if __name__ == "__main__":
    main()
