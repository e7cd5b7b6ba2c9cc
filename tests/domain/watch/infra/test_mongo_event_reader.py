"""Tests for the MongoDB upcoming event reader."""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.watch._events import MongoEventReader
from app.schemas import EventState, WatchEvent


async def insert_event(starts_at: datetime, **overrides) -> WatchEvent:
    now = datetime.now(timezone.utc)
    data = {
        "channel_id": "ch_event_test",
        "org_id": "org_event_test",
        "starts_at": starts_at,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    event = WatchEvent(**data)
    await event.insert()
    return event


@pytest.mark.usefixtures("clear_collections")
class TestFindUpcomingEvent:
    @pytest.fixture
    def reader(self) -> MongoEventReader:
        return MongoEventReader()

    async def test_no_events(self, beanie_db, reader: MongoEventReader):
        assert await reader.find_upcoming_event("ch_event_test", datetime.now(timezone.utc)) is None

    async def test_earliest_scheduled_or_live_event(self, beanie_db, reader: MongoEventReader):
        now = datetime.now(timezone.utc)
        await insert_event(now + timedelta(days=3))
        await insert_event(now + timedelta(days=1), state=EventState.CANCELLED)
        await insert_event(now - timedelta(days=1))
        await insert_event(now + timedelta(hours=1), channel_id="ch_other")
        live = await insert_event(now + timedelta(days=2), state=EventState.LIVE, title="Final")

        record = await reader.find_upcoming_event("ch_event_test", now)

        assert record is not None
        assert record.event_id == live.event_id
        assert record.state == EventState.LIVE
        assert record.title == "Final"

    async def test_generated_event_id(self, beanie_db):
        event = await insert_event(datetime.now(timezone.utc))

        assert event.event_id.startswith("ev_")
