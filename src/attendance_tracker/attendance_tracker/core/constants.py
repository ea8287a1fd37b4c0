"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000.0

DEFAULT_CENTER_RADIUS_METERS = 200.0
DEFAULT_ALLOWED_LOCATION_RADIUS_METERS = 100.0

SIGNIFICANT_MOVE_KM = 1.0
STATIONARY_DWELL_MINUTES = 15
STATIONARY_RADIUS_METERS = 50.0

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_TOP_LOCATIONS = 5
DEFAULT_REPORT_DAYS = 7
