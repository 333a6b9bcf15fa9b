"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from event_board.config import settings
from event_board.database import init_db

from event_board.routers import events

# Import all models so Base.metadata knows about them
from event_board.models.event import Event          # noqa: F401
from event_board.models.id_counter import IdCounter  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Event Board",
    description="Event listings with owner-only edits and open attendance",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events.router, prefix="/api/events", tags=["Events"])


@app.on_event("startup")
def on_startup():
    """Create tables and seed the id counter on startup (SQLite, including the default in-memory store)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        init_db()


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
