"""Pydantic schemas for Events and the errors event operations can return."""
from __future__ import annotations
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel


class EventPayload(BaseModel):
    """The four owner-editable text fields. Contents are not validated."""

    event_title: str
    event_description: str
    event_card_imgurl: str
    event_location: str


class EventOut(BaseModel):
    """A by-value copy of a stored event."""

    id: int
    owner: str
    event_title: str
    event_description: str
    event_card_imgurl: str
    event_location: str
    attendees: list[str] = []
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class NotFound(BaseModel):
    kind: Literal["NotFound"] = "NotFound"
    msg: str


class NotAuthorized(BaseModel):
    kind: Literal["NotAuthorized"] = "NotAuthorized"
    msg: str
    caller: str
