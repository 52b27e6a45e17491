# tests/conftest.py
# Shared fixtures: a manual clock so lifecycle tests never wait on real delays.

import os
import sys
import asyncio
from datetime import datetime, timedelta, timezone

import pytest

# Add parent dir to path so we can import our modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ticket_store import TicketStore


class ManualClock:
    """Virtual time. ``sleep`` only returns once ``advance`` has moved past its deadline."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self._start = start
        self._elapsed = 0.0
        self._sleepers: list[tuple[float, asyncio.Future]] = []

    def now(self) -> datetime:
        return self._start + timedelta(seconds=self._elapsed)

    async def sleep(self, seconds: float) -> None:
        if seconds <= 0:
            await asyncio.sleep(0)
            return
        future = asyncio.get_running_loop().create_future()
        self._sleepers.append((self._elapsed + seconds, future))
        await future

    async def advance(self, seconds: float) -> None:
        await self._settle()
        self._elapsed += seconds
        due = [s for s in self._sleepers if s[0] <= self._elapsed]
        self._sleepers = [s for s in self._sleepers if s[0] > self._elapsed]
        for _, future in due:
            if not future.done():
                future.set_result(None)
        await self._settle()

    @staticmethod
    async def _settle() -> None:
        # let freshly created tasks reach their next await
        for _ in range(10):
            await asyncio.sleep(0)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def store(clock) -> TicketStore:
    return TicketStore(clock=clock, inference_delay=1.5, response_delay=2.0)


@pytest.fixture
def submit(store, clock):
    """Run a submission to completion by advancing past the inference delay."""
    async def _submit(text: str, user: str):
        task = asyncio.create_task(store.submit(text, user))
        await clock.advance(store.inference_delay)
        return await task
    return _submit
