import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

LONG_NAME_WARNING_LENGTH = int(os.getenv("LONG_NAME_WARNING_LENGTH", "50"))
