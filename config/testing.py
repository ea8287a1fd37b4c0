DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SIGNIFICANT_MOVE_KM = 1.0
STATIONARY_DWELL_MINUTES = 15
STATIONARY_RADIUS_METERS = 50.0

DEFAULT_CENTER_RADIUS_METERS = 200.0

DEFAULT_HISTORY_LIMIT = 30
