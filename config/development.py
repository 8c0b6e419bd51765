import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

STORE_LATENCY_MS = Config.STORE_LATENCY_MS

# Demo accounts (admin@miracle.com / Admin@123456, ...) are loaded on startup
SEED_DEMO_DATA = Config.SEED_DEMO_DATA
