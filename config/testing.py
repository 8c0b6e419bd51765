SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# No artificial delay under test
STORE_LATENCY_MS = (0, 0)

SEED_DEMO_DATA = True
