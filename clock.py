# clock.py
# Time source + delay used by the ticket store. Production binds to asyncio;
# tests pass a manual clock that advances virtual time.

import asyncio
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...

    async def sleep(self, seconds: float) -> None: ...


class AsyncioClock:
    """Wall-clock UTC time and real ``asyncio.sleep`` delays."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(max(0.0, seconds))
