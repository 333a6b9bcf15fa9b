"""Core event store — the five event operations.

Responsibilities:
- Id allocation from a monotonically increasing counter (ids are never reissued)
- Only the owner may update/delete
- Idempotent attendance
- One operation at a time: the store lock is held until the transaction has
  ended, committed or rolled back

Domain failures are returned as ``Err`` values, never raised. Callers always
receive ``EventOut`` copies, never live ORM rows.
"""
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from event_board.models.event import Event
from event_board.models.id_counter import COUNTER_ROW, IdCounter
from event_board.schemas.event import EventOut, EventPayload, NotAuthorized, NotFound
from event_board.services.result import Err, Ok, Result

logger = logging.getLogger(__name__)

_store_lock = threading.RLock()

# Largest id the BigInteger column can hold.
_MAX_STORED_ID = 2**63 - 1


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@contextmanager
def _locked(db: Session):
    """Run one operation under the store lock.

    Whatever the operation did not commit is rolled back before the lock is
    released, so the session hands its connection back to the pool while no
    other operation can be using it.
    """
    with _store_lock:
        try:
            yield
        finally:
            db.rollback()


def _event_snapshot(event: Event) -> EventOut:
    """Copy an ORM row into a detached value object."""
    return EventOut(
        id=event.id,
        owner=event.owner,
        event_title=event.event_title,
        event_description=event.event_description,
        event_card_imgurl=event.event_card_imgurl,
        event_location=event.event_location,
        attendees=list(event.attendees or []),
        created_at=_as_utc(event.created_at),
        updated_at=_as_utc(event.updated_at),
    )


def _allocate_id(db: Session) -> int:
    """Hand out the counter's current value and advance it.

    The row is locked for the rest of the caller's transaction, so the bump
    commits together with the insert that uses the id.
    """
    counter = db.get(IdCounter, COUNTER_ROW, with_for_update=True)
    if counter is None:
        raise RuntimeError("id_counter row is missing; run the migrations or init_db()")
    event_id = counter.next_value
    counter.next_value = event_id + 1
    return event_id


def _load_event(db: Session, event_id: int) -> Optional[Event]:
    if event_id < 0 or event_id > _MAX_STORED_ID:
        return None
    return db.get(Event, event_id)


def _not_found(event_id: int) -> Err:
    return Err(NotFound(msg=f"Event with id={event_id} not found"))


def _check_authorization(event: Event, caller: str) -> Optional[Err]:
    """Only the owner may update or delete."""
    if event.owner != caller:
        return Err(NotAuthorized(
            msg=f"You're not the owner of the event with id={event.id}",
            caller=caller,
        ))
    return None


def create_event(db: Session, payload: EventPayload, caller: str) -> EventOut:
    """Store a new event owned by ``caller``. Always succeeds."""
    with _locked(db):
        event = Event(
            id=_allocate_id(db),
            owner=caller,
            event_title=payload.event_title,
            event_description=payload.event_description,
            event_card_imgurl=payload.event_card_imgurl,
            event_location=payload.event_location,
            attendees=[],
            created_at=_now(),
            updated_at=None,
        )
        db.add(event)
        db.flush()
        snapshot = _event_snapshot(event)
        db.commit()
    logger.info("Created event %d '%s' owned by %s", snapshot.id, snapshot.event_title, caller)
    return snapshot


def get_event(db: Session, event_id: int) -> Result[EventOut]:
    with _locked(db):
        event = _load_event(db, event_id)
        if event is None:
            return _not_found(event_id)
        return Ok(_event_snapshot(event))


def update_event(db: Session, event_id: int, payload: EventPayload, caller: str) -> Result[EventOut]:
    """Overwrite the text fields of an event the caller owns."""
    with _locked(db):
        event = _load_event(db, event_id)
        if event is None:
            logger.warning("Update of missing event %d by %s", event_id, caller)
            return _not_found(event_id)

        denied = _check_authorization(event, caller)
        if denied is not None:
            logger.warning("Rejected update of event %d by non-owner %s", event_id, caller)
            return denied

        event.event_title = payload.event_title
        event.event_description = payload.event_description
        event.event_card_imgurl = payload.event_card_imgurl
        event.event_location = payload.event_location
        event.updated_at = max(_now(), _as_utc(event.created_at))
        db.flush()
        snapshot = _event_snapshot(event)
        db.commit()
    logger.info("Updated event %d", event_id)
    return Ok(snapshot)


def delete_event(db: Session, event_id: int, caller: str) -> Result[EventOut]:
    """Remove an event the caller owns and return its final state."""
    with _locked(db):
        event = _load_event(db, event_id)
        if event is None:
            logger.warning("Delete of missing event %d by %s", event_id, caller)
            return _not_found(event_id)

        denied = _check_authorization(event, caller)
        if denied is not None:
            logger.warning("Rejected delete of event %d by non-owner %s", event_id, caller)
            return denied

        snapshot = _event_snapshot(event)
        db.delete(event)
        db.commit()
    logger.info("Deleted event %d", event_id)
    return Ok(snapshot)


def attend_event(db: Session, event_id: int, caller: str) -> Result[EventOut]:
    """Add ``caller`` to the attendees. Any caller may attend; repeats are no-ops.

    Attendance does not touch ``updated_at``.
    """
    with _locked(db):
        event = _load_event(db, event_id)
        if event is None:
            logger.warning("Attend of missing event %d by %s", event_id, caller)
            return _not_found(event_id)

        attendees = list(event.attendees or [])
        if caller in attendees:
            logger.debug("%s already attends event %d", caller, event_id)
            return Ok(_event_snapshot(event))

        # Reassign rather than append in place so the JSON column is flagged dirty.
        event.attendees = attendees + [caller]
        db.flush()
        snapshot = _event_snapshot(event)
        db.commit()
    logger.info("%s is attending event %d", caller, event_id)
    return Ok(snapshot)
