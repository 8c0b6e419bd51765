import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

STORE_LATENCY_MS = Config.STORE_LATENCY_MS

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
