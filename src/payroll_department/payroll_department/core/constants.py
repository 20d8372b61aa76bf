"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_BASE_PAY = 1_000_000.0
MIN_BONUS_PERCENT = 0.0
MAX_BONUS_PERCENT = 100.0

DEFAULT_LONG_NAME_WARNING_LENGTH = 50

MENU_CHOICE_MIN = 0
MENU_CHOICE_MAX = 3
