import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Movement classification thresholds
SIGNIFICANT_MOVE_KM = float(os.getenv("SIGNIFICANT_MOVE_KM", "1.0"))
STATIONARY_DWELL_MINUTES = float(os.getenv("STATIONARY_DWELL_MINUTES", "15"))
STATIONARY_RADIUS_METERS = float(os.getenv("STATIONARY_RADIUS_METERS", "50"))

# Geofence used when a center is created without an explicit radius
DEFAULT_CENTER_RADIUS_METERS = float(os.getenv("DEFAULT_CENTER_RADIUS_METERS", "200"))

DEFAULT_HISTORY_LIMIT = int(os.getenv("DEFAULT_HISTORY_LIMIT", "30"))
