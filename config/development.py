import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Names longer than this are accepted but logged as a warning
LONG_NAME_WARNING_LENGTH = int(os.getenv("LONG_NAME_WARNING_LENGTH", "50"))
