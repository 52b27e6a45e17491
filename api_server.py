# api_server.py
# FastAPI surface over the ticket store: POST /ticket, GET /tickets, /stats, ...
# Only translates HTTP <-> TicketStore calls; all behaviour lives in the core.

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from config import CATEGORY_FILTER_ALL, RECENT_ACTIVITY_LIMIT
from exceptions import SubmissionInProgressError, ValidationError
from log_config import get_logger, setup_logging
from shared_types import Ticket
from ticket_store import TicketStore

logger = get_logger(__name__)

# ── Store (created lazily, tests swap it out) ────────────────────────────────

_store: Optional[TicketStore] = None


def get_store() -> TicketStore:
    global _store
    if _store is None:
        _store = TicketStore()
    return _store

# ── App Lifespan ──────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    store = get_store()
    logger.info(
        "Ticket service started",
        extra={
            "inference_delay": store.inference_delay,
            "response_delay": store.response_delay,
        },
    )
    yield

app = FastAPI(
    title="AI Ticket System",
    version="1.0.0",
    lifespan=lifespan,
)

# ── Request / Response Models ─────────────────────────────────────────────────

class TicketRequest(BaseModel):
    text: str
    user: str

class TicketResponse(BaseModel):
    id: str
    user: str
    text: str
    created_at: datetime
    status: str
    category: str
    confidence: float
    confidence_percent: int
    priority: str
    color: str
    response: str

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketResponse":
        return cls(
            id=ticket.id,
            user=ticket.user,
            text=ticket.text,
            created_at=ticket.created_at,
            status=ticket.status,
            category=ticket.category,
            confidence=ticket.confidence,
            confidence_percent=ticket.confidence_percent,
            priority=ticket.priority,
            color=ticket.color,
            response=ticket.response,
        )

class CategoryStatsResponse(BaseModel):
    count: int
    percentage: int

class StatsResponse(BaseModel):
    total: int
    categories: dict[str, CategoryStatsResponse]

class CategoryResponse(BaseModel):
    name: str
    label: str
    priority: str
    color: str

class HealthResponse(BaseModel):
    status: str
    total_tickets: int
    busy: bool

# ── POST /ticket ──────────────────────────────────────────────────────────────

@app.post("/ticket", status_code=201, response_model=TicketResponse)
async def create_ticket(req: TicketRequest):
    """Classify and store a ticket. Returns after the simulated inference delay."""
    try:
        ticket = await get_store().submit(req.text, req.user)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except SubmissionInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return TicketResponse.from_ticket(ticket)

# ── GET /tickets ──────────────────────────────────────────────────────────────

@app.get("/tickets", response_model=list[TicketResponse])
async def list_tickets(q: str = "", category: str = CATEGORY_FILTER_ALL):
    return [TicketResponse.from_ticket(t) for t in get_store().filter(q, category)]


@app.get("/tickets/{ticket_id}", response_model=TicketResponse)
async def get_ticket(ticket_id: str):
    ticket = get_store().get(ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail=f"Ticket '{ticket_id}' not found")
    return TicketResponse.from_ticket(ticket)

# ── Analytics ─────────────────────────────────────────────────────────────────

@app.get("/stats", response_model=StatsResponse)
async def get_stats():
    store = get_store()
    return StatsResponse(
        total=len(store),
        categories={
            name: CategoryStatsResponse(count=s.count, percentage=s.percentage)
            for name, s in store.stats().items()
        },
    )


@app.get("/recent", response_model=list[TicketResponse])
async def recent_activity(limit: int = RECENT_ACTIVITY_LIMIT):
    return [TicketResponse.from_ticket(t) for t in get_store().recent(limit)]


@app.get("/categories", response_model=list[CategoryResponse])
async def list_categories():
    return [
        CategoryResponse(name=c.name, label=c.label, priority=c.priority, color=c.color)
        for c in get_store().registry
    ]

# ── GET /health ───────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health_check():
    store = get_store()
    return HealthResponse(status="ok", total_tickets=len(store), busy=store.busy)

# ── Entry Point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    from config import API_HOST, API_PORT
    uvicorn.run("api_server:app", host=API_HOST, port=API_PORT)
