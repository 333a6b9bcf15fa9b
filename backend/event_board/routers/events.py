"""Event API routes — thin HTTP layer over event_service."""
import logging
from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from event_board.auth import get_caller
from event_board.database import get_db
from event_board.schemas.event import EventOut, EventPayload, NotAuthorized, NotFound
from event_board.services import event_service
from event_board.services.result import Err, Ok, Result

logger = logging.getLogger(__name__)
router = APIRouter()

U64_MAX = 2**64 - 1

EventId = Annotated[int, Path(ge=0, le=U64_MAX, description="Event id (unsigned 64-bit)")]


def _unwrap(result: Result[EventOut]) -> EventOut:
    """Map an operation result onto an HTTP response."""
    match result:
        case Ok(value=event):
            return event
        case Err(error=NotFound() as error):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.model_dump())
        case Err(error=NotAuthorized() as error):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=error.model_dump())
    raise TypeError(f"Unexpected result {result!r}")


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventPayload,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
):
    """Create an event owned by the caller."""
    return event_service.create_event(db=db, payload=payload, caller=caller)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: EventId, db: Session = Depends(get_db)):
    """Fetch a single event by id."""
    return _unwrap(event_service.get_event(db=db, event_id=event_id))


@router.put("/{event_id}", response_model=EventOut)
def update_event(
    payload: EventPayload,
    event_id: EventId,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
):
    """Replace the text fields of an event (owner only)."""
    return _unwrap(event_service.update_event(db=db, event_id=event_id, payload=payload, caller=caller))


@router.delete("/{event_id}", response_model=EventOut)
def delete_event(
    event_id: EventId,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
):
    """Permanently delete an event (owner only). Returns its final state."""
    return _unwrap(event_service.delete_event(db=db, event_id=event_id, caller=caller))


@router.post("/{event_id}/attend", response_model=EventOut)
def attend_event(
    event_id: EventId,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
):
    """Join an event. Attending twice is a no-op."""
    return _unwrap(event_service.attend_event(db=db, event_id=event_id, caller=caller))
