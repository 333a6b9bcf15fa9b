"""SQLAlchemy engine, session factory and declarative base."""
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from event_board.config import settings


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # An in-memory database only lives as long as its connection, so every
    # session has to share the same one.
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """FastAPI dependency yielding a session that is always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=engine) -> None:
    """Create the tables and seed the id counter row if it is missing."""
    from event_board.models.event import Event  # noqa: F401
    from event_board.models.id_counter import COUNTER_ROW, IdCounter

    Base.metadata.create_all(bind=bind)
    with Session(bind) as session:
        if session.get(IdCounter, COUNTER_ROW) is None:
            session.add(IdCounter(counter_id=COUNTER_ROW, next_value=0))
            session.commit()
