import os


def _latency(value: str, default: tuple[int, int]) -> tuple[int, int]:
    # "200,500" -> (200, 500)
    if not value:
        return default
    low, _, high = value.partition(",")
    return int(low), int(high or low)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"
    DEBUG = bool(int(os.environ.get("DEBUG", "0")))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Simulated store round-trip, milliseconds
    STORE_LATENCY_MS = _latency(os.environ.get("STORE_LATENCY_MS", ""), (200, 500))
    SEED_DEMO_DATA = bool(int(os.environ.get("SEED_DEMO_DATA", "1")))
