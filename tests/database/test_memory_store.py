from __future__ import annotations

import asyncio
import random

import pytest

from src.employee_directory.employee_directory.database.memory_store import InMemoryDatabase, db_call
from src.employee_directory.employee_directory.database.seed import DEMO_ACCOUNTS, ensure_demo_accounts


def test_rejects_inverted_latency_range():
    with pytest.raises(ValueError):
        InMemoryDatabase(latency_ms=(500, 200))


def test_latency_is_drawn_from_range(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    db = InMemoryDatabase(latency_ms=(200, 500), rng=random.Random(7))

    async def scenario():
        for _ in range(20):
            async with db_call(db):
                pass

    asyncio.run(scenario())
    assert len(delays) == 20
    assert all(0.2 <= d <= 0.5 for d in delays)


def test_next_id_never_repeats():
    db = InMemoryDatabase(latency_ms=(0, 0))
    ids = {db.next_id("emp") for _ in range(1000)}
    assert len(ids) == 1000
    assert all(i.startswith("emp-") for i in ids)


def test_seed_is_idempotent():
    db = InMemoryDatabase(latency_ms=(0, 0))
    ensure_demo_accounts(db)
    ensure_demo_accounts(db)

    assert len(db.employees) == len(DEMO_ACCOUNTS) == 3
    assert set(db.principals) == {"admin@miracle.com", "employee1@miracle.com", "employee2@miracle.com"}


def test_separate_databases_do_not_share_records():
    a = InMemoryDatabase(latency_ms=(0, 0))
    b = InMemoryDatabase(latency_ms=(0, 0))
    ensure_demo_accounts(a)

    assert len(a.employees) == 3
    assert b.employees == []
