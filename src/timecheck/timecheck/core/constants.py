"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_COOLDOWN_SECONDS = 60
DEFAULT_STANDARD_SHIFT_HOURS = 8
DEFAULT_ENTRY_TOLERANCE_MINUTES = 15
DEFAULT_TIMEZONE = "America/Mexico_City"
DEFAULT_COMPANY_NAME = "TimeCheck Pro"

# Upper bounds accepted by the settings API
MAX_STANDARD_SHIFT_HOURS = 24
MAX_COOLDOWN_SECONDS = 86_400
MAX_ENTRY_TOLERANCE_MINUTES = 1_440

# Scanner heuristics (milliseconds / characters)
DEFAULT_INTER_CHAR_MS = 100
DEFAULT_MIN_SCAN_LENGTH = 3
DEFAULT_INACTIVITY_MS = 1000

DEFAULT_REPORT_DAYS = 7
MS_PER_HOUR = 3_600_000
