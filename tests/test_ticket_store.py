# tests/test_ticket_store.py
# Lifecycle tests run on virtual time: see ManualClock in conftest.py.

import asyncio
import pytest

from exceptions import SubmissionInProgressError, ValidationError
from shared_types import Ticket
from ticket_store import TicketStore


# --------------------------
# Submission
# --------------------------

@pytest.mark.asyncio
async def test_submit_waits_for_inference_delay(store, clock):
    task = asyncio.create_task(store.submit("printer is broken", "alice"))
    await clock.advance(1.0)
    assert not task.done()
    assert len(store) == 0

    await clock.advance(0.5)
    ticket = await task
    assert ticket.status == "Processing"
    assert ticket.category == "IT_Support"
    assert ticket.user == "alice"
    assert ticket.created_at == clock.now()


@pytest.mark.asyncio
async def test_ticket_lifecycle(store, clock, submit):
    ticket = await submit("printer is broken", "alice")
    assert store.list()[0].status == "Processing"

    await clock.advance(1.9)
    assert store.list()[0].status == "Processing"

    await clock.advance(0.2)
    responded = store.list()[0]
    assert responded.status == "Responded"
    assert responded.id == ticket.id
    assert responded.category == ticket.category
    assert responded.confidence == ticket.confidence


@pytest.mark.asyncio
async def test_newest_first(store, submit):
    first = await submit("forgot my password", "alice")
    second = await submit("leave balance", "bob")
    assert [t.id for t in store.list()] == [second.id, first.id]


@pytest.mark.asyncio
async def test_ids_are_unique_and_increasing(clock):
    store = TicketStore(clock=clock, inference_delay=0, response_delay=2.0)
    ids = [(await store.submit(f"ticket {i}", "alice")).id for i in range(3)]
    assert len(set(ids)) == 3
    assert all(i.startswith("TKT-") for i in ids)
    numbers = [int(i.split("-")[1]) for i in ids]
    assert numbers == sorted(numbers)


# --------------------------
# Validation & busy gate
# --------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("text,user,field", [
    ("", "alice", "text"),
    ("   ", "alice", "text"),
    ("help", "", "user"),
    ("help", " \t", "user"),
])
async def test_blank_fields_rejected(store, text, user, field):
    with pytest.raises(ValidationError) as exc:
        await store.submit(text, user)
    assert exc.value.field == field
    assert store.list() == []
    assert not store.busy


@pytest.mark.asyncio
async def test_second_submit_rejected_while_busy(store, clock):
    task = asyncio.create_task(store.submit("printer is broken", "alice"))
    await clock.advance(0.5)
    assert store.busy

    with pytest.raises(SubmissionInProgressError):
        await store.submit("forgot my password", "bob")

    await clock.advance(1.0)
    await task
    assert not store.busy
    assert len(store) == 1


@pytest.mark.asyncio
async def test_store_accepts_after_previous_completes(store, submit):
    await submit("printer is broken", "alice")
    await submit("forgot my password", "bob")
    assert len(store) == 2


# --------------------------
# Reads
# --------------------------

@pytest.mark.asyncio
async def test_list_returns_copies(store, clock, submit):
    await submit("printer is broken", "alice")
    snapshot = store.list()
    snapshot[0].status = "Escalated"
    snapshot.clear()

    assert store.list()[0].status == "Processing"

    held = store.list()[0]
    await clock.advance(2.0)
    assert held.status == "Processing"
    assert store.list()[0].status == "Responded"


@pytest.mark.asyncio
async def test_get(store, submit):
    ticket = await submit("printer is broken", "alice")
    assert store.get(ticket.id) == ticket
    assert store.get("TKT-0") is None


@pytest.mark.asyncio
async def test_transition_is_noop_for_unknown_ticket(store):
    store._mark_responded("TKT-missing")
    assert store.list() == []


@pytest.mark.asyncio
async def test_filter_and_stats_facades(store, submit):
    await submit("forgot my password", "alice")
    await submit("printer is slow", "bob")
    await submit("where is the cafeteria", "Alice")

    assert [t.user for t in store.filter("alice", "All")] == ["Alice", "alice"]
    assert [t.user for t in store.filter("", "IT_Support")] == ["bob"]

    stats = store.stats()
    assert list(stats) == ["Authentication", "IT_Support", "General_Inquiry"]
    assert stats["IT_Support"].count == 1
    assert stats["IT_Support"].percentage == 33


@pytest.mark.asyncio
async def test_recent_activity(clock):
    store = TicketStore(clock=clock, inference_delay=0, response_delay=2.0)
    for i in range(7):
        await store.submit(f"ticket {i}", "alice")
    recent = store.recent()
    assert len(recent) == 5
    assert recent[0].text == "ticket 6"
    assert store.recent(2) == store.list()[:2]


@pytest.mark.asyncio
async def test_escalated_never_set(store, clock, submit):
    await submit("system error", "alice")
    await clock.advance(10)
    assert {t.status for t in store.list()} == {"Responded"}


def test_read_methods_return_builtin_lists():
    for method in (TicketStore.list, TicketStore.filter, TicketStore.recent):
        assert method.__annotations__["return"] == list[Ticket]
