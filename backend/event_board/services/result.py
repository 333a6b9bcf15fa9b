"""Discriminated success/error result returned by store operations.

Store operations never raise for domain failures. Callers branch on the
result, either with ``match`` or via ``is_ok``::

    match event_service.get_event(db, event_id):
        case Ok(value=event):
            ...
        case Err(error=NotFound()):
            ...
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from event_board.schemas.event import NotFound, NotAuthorized

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: Union[NotFound, NotAuthorized]

    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
