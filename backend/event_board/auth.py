"""Caller identity.

Authentication happens in front of this service: the gateway verifies the
caller and forwards the identifier in ``settings.CALLER_HEADER``. The value is
trusted as-is. Requests without it act as the anonymous caller.
"""
from fastapi import Request

from event_board.config import settings


def get_caller(request: Request) -> str:
    """FastAPI dependency returning the verified caller identifier."""
    caller = request.headers.get(settings.CALLER_HEADER, "").strip()
    return caller or settings.ANONYMOUS_CALLER
