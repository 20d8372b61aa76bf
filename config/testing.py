DEBUG = False
TESTING = True

LOG_LEVEL = "DEBUG"

LONG_NAME_WARNING_LENGTH = 50
