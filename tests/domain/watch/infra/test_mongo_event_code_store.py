"""Tests for the MongoDB event code store."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.domain.watch._event_codes import MongoEventCodeStore
from app.schemas import EventCode, EventCodeStatus


async def insert_event_code(**overrides) -> EventCode:
    now = datetime.now(timezone.utc)
    data = {
        "channel_id": "ch_store_test",
        "code": "4134254",
        "status": EventCodeStatus.ACTIVE,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    event_code = EventCode(**data)
    await event_code.insert()
    return event_code


@pytest.mark.usefixtures("clear_collections")
class TestFindByChannelAndCode:
    @pytest.fixture
    def store(self) -> MongoEventCodeStore:
        return MongoEventCodeStore()

    async def test_finds_exact_match(self, beanie_db, store: MongoEventCodeStore):
        inserted = await insert_event_code()

        record = await store.find_by_channel_and_code("ch_store_test", "4134254")

        assert record is not None
        assert record.event_code_id == inserted.event_code_id
        assert record.status == EventCodeStatus.ACTIVE
        assert record.bound_ip_hash is None
        assert record.bound_at is None

    async def test_code_is_case_sensitive(self, beanie_db, store: MongoEventCodeStore):
        await insert_event_code(code="GameDay7")

        assert await store.find_by_channel_and_code("ch_store_test", "gameday7") is None

    async def test_code_is_scoped_to_channel(self, beanie_db, store: MongoEventCodeStore):
        await insert_event_code()

        assert await store.find_by_channel_and_code("ch_other", "4134254") is None


@pytest.mark.usefixtures("clear_collections")
class TestBindToFingerprint:
    @pytest.fixture
    def store(self) -> MongoEventCodeStore:
        return MongoEventCodeStore()

    async def test_binds_unbound_code(self, beanie_db, store: MongoEventCodeStore):
        inserted = await insert_event_code()
        bound_at = datetime.now(timezone.utc)

        assert await store.bind_to_fingerprint(inserted.event_code_id, "hash-a", bound_at) is True

        saved = await EventCode.find_one(EventCode.event_code_id == inserted.event_code_id)
        assert saved is not None
        assert saved.bound_ip_hash == "hash-a"
        assert saved.bound_at is not None
        assert abs(saved.bound_at - bound_at) < timedelta(milliseconds=1)

    async def test_never_overwrites_existing_binding(self, beanie_db, store: MongoEventCodeStore):
        inserted = await insert_event_code()
        await store.bind_to_fingerprint(inserted.event_code_id, "hash-a", datetime.now(timezone.utc))

        assert await store.bind_to_fingerprint(inserted.event_code_id, "hash-b", datetime.now(timezone.utc)) is False

        record = await store.find_by_channel_and_code("ch_store_test", "4134254")
        assert record is not None
        assert record.bound_ip_hash == "hash-a"

    async def test_unknown_code_is_not_bound(self, beanie_db, store: MongoEventCodeStore):
        assert await store.bind_to_fingerprint("ec_missing", "hash-a", datetime.now(timezone.utc)) is False

    async def test_concurrent_binds_have_single_winner(self, beanie_db, store: MongoEventCodeStore):
        inserted = await insert_event_code()
        now = datetime.now(timezone.utc)

        results = await asyncio.gather(
            *(store.bind_to_fingerprint(inserted.event_code_id, f"hash-{i}", now) for i in range(10))
        )

        assert results.count(True) == 1
        winner = f"hash-{results.index(True)}"
        record = await store.find_by_channel_and_code("ch_store_test", "4134254")
        assert record is not None
        assert record.bound_ip_hash == winner


def test_binding_fields_must_be_set_together(beanie_db):
    now = datetime.now(timezone.utc)

    with pytest.raises(ValidationError):
        EventCode(
            event_code_id="ec_invalid",
            channel_id="ch_test",
            code="4134254",
            bound_ip_hash="hash-a",
            bound_at=None,
            created_at=now,
            updated_at=now,
        )
