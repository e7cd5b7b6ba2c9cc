"""Storage capabilities the watch-link resolver depends on."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Protocol

from loguru import logger
from pymongo.errors import ConnectionFailure, ExecutionTimeout, WTimeoutError

from .watch_models import EventCodeRecord, WatchChannelRecord, WatchEventRecord

# ServerSelectionTimeoutError and NetworkTimeout are ConnectionFailure subclasses
_TRANSIENT_MONGO_ERRORS = (ConnectionFailure, ExecutionTimeout, WTimeoutError)


class StoreUnavailableError(Exception):
    """The backing store could not be reached or did not answer in time."""


class ChannelDirectory(Protocol):
    async def get_channel_by_org_and_slug(
        self,
        org_short_name: str,
        team_slug: str,
    ) -> WatchChannelRecord | None:
        """Return the channel for an exact (case-sensitive) org/team pair, or None."""
        ...


class EventCodeReader(Protocol):
    async def find_by_channel_and_code(
        self,
        channel_id: str,
        code: str,
    ) -> EventCodeRecord | None:
        """Return the event code with this exact value on the channel, or None."""
        ...


class EventCodeWriter(Protocol):
    async def bind_to_fingerprint(
        self,
        event_code_id: str,
        fingerprint: str,
        bound_at: datetime,
    ) -> bool:
        """Bind the code only if it is still unbound.

        Returns True when this call performed the bind, False when the code
        was already bound (or no longer exists). An existing binding is never
        overwritten.
        """
        ...


class EventReader(Protocol):
    async def find_upcoming_event(
        self,
        channel_id: str,
        starts_after: datetime,
    ) -> WatchEventRecord | None:
        """Return the earliest scheduled or live event starting at or after `starts_after`, or None."""
        ...


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise driver connectivity and timeout failures as StoreUnavailableError."""
    try:
        yield
    except _TRANSIENT_MONGO_ERRORS as e:
        logger.warning("Store failure during {}: {}: {}", operation, type(e).__name__, e)
        raise StoreUnavailableError(f"{operation} failed: {e}") from e


__all__ = [
    "ChannelDirectory",
    "EventCodeReader",
    "EventCodeWriter",
    "EventReader",
    "StoreUnavailableError",
    "translate_store_errors",
]
