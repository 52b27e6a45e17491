# ticket_store.py
# In-memory ticket store: submission pipeline (validate → simulated inference
# → classify → insert newest-first) and the delayed Processing → Responded
# transition. Process-lifetime only, nothing is persisted.

import asyncio
import dataclasses
from typing import Optional

from categories import DEFAULT_REGISTRY, CategoryRegistry
from clock import AsyncioClock, Clock
from config import (
    CATEGORY_FILTER_ALL,
    INFERENCE_DELAY_SECONDS,
    RECENT_ACTIVITY_LIMIT,
    RESPONSE_DELAY_SECONDS,
    TICKET_ID_PREFIX,
)
from exceptions import SubmissionInProgressError, ValidationError
from log_config import get_logger
from ml_engine import classify
from search import filter_tickets
from shared_types import PROCESSING, RESPONDED, CategoryStats, Ticket
from stats import category_stats

logger = get_logger(__name__)


class TicketStore:
    """
    Sole owner and writer of the ticket collection.

    Every read hands out copies, so callers can hold on to what they got
    without seeing (or causing) later status changes.
    """

    def __init__(
        self,
        registry: CategoryRegistry = DEFAULT_REGISTRY,
        clock: Optional[Clock] = None,
        inference_delay: float = INFERENCE_DELAY_SECONDS,
        response_delay: float = RESPONSE_DELAY_SECONDS,
    ):
        self.registry = registry
        self.clock = clock or AsyncioClock()
        self.inference_delay = inference_delay
        self.response_delay = response_delay

        self._tickets: list[Ticket] = []          # newest first
        self._by_id: dict[str, Ticket] = {}
        self._last_id_ms = 0
        self._busy = False
        self._pending: set[asyncio.Task] = set()

    # ── Submission ────────────────────────────────────────────────────────────

    @property
    def busy(self) -> bool:
        return self._busy

    async def submit(self, text: str, user: str) -> Ticket:
        if not (text or "").strip():
            raise ValidationError("text")
        if not (user or "").strip():
            raise ValidationError("user")
        if self._busy:
            logger.warning("Submission rejected, pipeline busy", extra={"user": user})
            raise SubmissionInProgressError()

        self._busy = True
        try:
            await self.clock.sleep(self.inference_delay)
            result = classify(text, self.registry)

            created_at = self.clock.now()
            ticket = Ticket.from_classification(
                ticket_id=self._next_id(created_at.timestamp()),
                user=user,
                text=text,
                created_at=created_at,
                result=result,
            )
            self._tickets.insert(0, ticket)
            self._by_id[ticket.id] = ticket
        finally:
            self._busy = False

        logger.info(
            "Ticket created",
            extra={
                "ticket_id": ticket.id,
                "category": ticket.category,
                "confidence": ticket.confidence,
                "priority": ticket.priority,
            },
        )
        self._schedule_response(ticket.id)
        return dataclasses.replace(ticket)

    def _next_id(self, timestamp: float) -> str:
        millis = int(timestamp * 1000)
        # two tickets in the same millisecond (or a clock going backwards)
        if millis <= self._last_id_ms:
            millis = self._last_id_ms + 1
        self._last_id_ms = millis
        return f"{TICKET_ID_PREFIX}-{millis}"

    # ── Status transition ─────────────────────────────────────────────────────

    def _schedule_response(self, ticket_id: str) -> None:
        task = asyncio.create_task(self._respond_later(ticket_id))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _respond_later(self, ticket_id: str) -> None:
        await self.clock.sleep(self.response_delay)
        self._mark_responded(ticket_id)

    def _mark_responded(self, ticket_id: str) -> None:
        ticket = self._by_id.get(ticket_id)
        if ticket is None or ticket.status != PROCESSING:
            return
        ticket.status = RESPONDED
        logger.info("Ticket responded", extra={"ticket_id": ticket_id})

    # ── Reads ─────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._tickets)

    def get(self, ticket_id: str) -> Optional[Ticket]:
        ticket = self._by_id.get(ticket_id)
        return dataclasses.replace(ticket) if ticket else None

    def filter(self, search_term: str = "", category_filter: str = CATEGORY_FILTER_ALL) -> list[Ticket]:
        return filter_tickets(self.list(), search_term, category_filter)

    def stats(self) -> dict[str, CategoryStats]:
        return category_stats(self._tickets, self.registry)

    def recent(self, limit: int = RECENT_ACTIVITY_LIMIT) -> list[Ticket]:
        return self.list()[:max(0, limit)]

    # defined last: the method name shadows the builtin in the class body
    def list(self) -> list[Ticket]:
        return [dataclasses.replace(t) for t in self._tickets]
