from __future__ import annotations

import asyncio
import itertools
import logging
import random
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from ..core.constants import DEFAULT_STORE_LATENCY_MS
from ..employees.model import Employee
from ..users.model import Principal

logger = logging.getLogger(__name__)


class InMemoryDatabase:
    """Process-lifetime tables standing in for a remote relational store.

    One instance is built per application container and injected into the
    repositories. Every access goes through :func:`db_call`, which waits a
    random delay first so callers see realistic loading states.
    """

    def __init__(
        self,
        *,
        latency_ms: tuple[int, int] = DEFAULT_STORE_LATENCY_MS,
        rng: Optional[random.Random] = None,
    ):
        low, high = (int(v) for v in latency_ms)
        if low < 0 or high < low:
            raise ValueError(f"Invalid latency range: {latency_ms!r}")
        self._latency_ms = (low, high)
        self._rng = rng or random.Random()
        self._seq = itertools.count(1)

        self.employees: list[Employee] = []
        # keyed by lower-cased email
        self.principals: dict[str, Principal] = {}

    @property
    def latency_ms(self) -> tuple[int, int]:
        return self._latency_ms

    def next_id(self, prefix: str) -> str:
        """Time-based token with a per-instance sequence so ids never repeat."""
        return f"{prefix}-{int(time.time() * 1000)}{next(self._seq):04d}"

    async def simulate_latency(self) -> None:
        low, high = self._latency_ms
        if high == 0:
            # still a suspension point, like a real network call
            await asyncio.sleep(0)
            return
        await asyncio.sleep(self._rng.uniform(low, high) / 1000)


@asynccontextmanager
async def db_call(db: InMemoryDatabase) -> AsyncIterator[InMemoryDatabase]:
    """Await the simulated round-trip, then hand out the tables.

    The body of the ``async with`` must not await: the read-modify-write it
    performs completes before control returns to the event loop.
    """
    await db.simulate_latency()
    try:
        yield db
    except Exception:
        logger.debug("in-memory store call failed", exc_info=True)
        raise
