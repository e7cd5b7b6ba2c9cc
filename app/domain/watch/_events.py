"""Event reader backed by the WatchEvent collection."""

from datetime import datetime

from beanie.operators import In
from pymongo import ASCENDING

from app.schemas import EventState, WatchEvent

from ._repositories import translate_store_errors
from .watch_models import WatchEventRecord

UPCOMING_EVENT_STATES = [EventState.SCHEDULED, EventState.LIVE]


class MongoEventReader:
    async def find_upcoming_event(
        self,
        channel_id: str,
        starts_after: datetime,
    ) -> WatchEventRecord | None:
        with translate_store_errors("upcoming event lookup"):
            event = (
                await WatchEvent.find(
                    WatchEvent.channel_id == channel_id,
                    WatchEvent.starts_at >= starts_after,
                    In(WatchEvent.state, UPCOMING_EVENT_STATES),
                )
                .sort([(WatchEvent.starts_at, ASCENDING)])  # type: ignore[list-item]
                .first_or_none()
            )
        if not event:
            return None

        return to_event_record(event)


def to_event_record(event: WatchEvent) -> WatchEventRecord:
    return WatchEventRecord(
        event_id=event.event_id,
        channel_id=event.channel_id,
        title=event.title,
        starts_at=event.starts_at,
        state=event.state,
    )
