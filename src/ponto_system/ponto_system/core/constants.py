"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_JOURNEY_MINUTES = 8 * 60
OVERTIME_TOLERANCE_MINUTES = 11

# Reference date used to re-anchor times of day before subtracting them.
REFERENCE_DATE_ISO = "2000-01-01"

TIME_FORMAT = "%H:%M"
