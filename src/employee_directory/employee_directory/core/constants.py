"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Simulated round-trip of the in-memory store, in milliseconds.
DEFAULT_STORE_LATENCY_MS = (200, 500)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

EMAIL_MIN_LENGTH = 3
EMAIL_MAX_LENGTH = 254

PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
PASSWORD_SPECIAL_CHARS = "@$!%*?&"

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."
