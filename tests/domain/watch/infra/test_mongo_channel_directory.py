"""Tests for the MongoDB channel directory."""

from datetime import datetime, timezone

import pytest

from app.domain.watch._directory import MongoChannelDirectory
from app.schemas import ExternalProvider, Organization, StreamType, WatchChannel


async def insert_org_with_channel(**channel_overrides) -> tuple[Organization, WatchChannel]:
    now = datetime.now(timezone.utc)
    org = Organization(
        short_name="TCHSKISD",
        name="Tech High ISD",
        owner_account_id="owner_1",
        created_at=now,
        updated_at=now,
    )
    await org.insert()

    data = {
        "org_id": org.org_id,
        "org_short_name": org.short_name,
        "team_slug": "SoccerJV2",
        "display_name": "Soccer JV2",
        "stream_type": StreamType.BYO_HLS,
        "hls_manifest_url": "https://stream.mux.com/abc.m3u8",
        "created_at": now,
        "updated_at": now,
    }
    data.update(channel_overrides)
    channel = WatchChannel(**data)
    await channel.insert()
    return org, channel


@pytest.mark.usefixtures("clear_collections")
class TestMongoChannelDirectory:
    @pytest.fixture
    def directory(self) -> MongoChannelDirectory:
        return MongoChannelDirectory()

    async def test_resolves_org_and_team(self, beanie_db, directory: MongoChannelDirectory):
        _, channel = await insert_org_with_channel(require_event_code=True)

        record = await directory.get_channel_by_org_and_slug("TCHSKISD", "SoccerJV2")

        assert record is not None
        assert record.channel_id == channel.channel_id
        assert record.org_short_name == "TCHSKISD"
        assert record.require_event_code is True
        assert record.stream_type == StreamType.BYO_HLS
        assert record.hls_manifest_url == "https://stream.mux.com/abc.m3u8"

    async def test_maps_external_embed_fields(self, beanie_db, directory: MongoChannelDirectory):
        await insert_org_with_channel(
            stream_type=StreamType.EXTERNAL_EMBED,
            hls_manifest_url=None,
            external_embed_url="https://player.twitch.tv/?channel=tchskisd",
            external_provider=ExternalProvider.TWITCH,
        )

        record = await directory.get_channel_by_org_and_slug("TCHSKISD", "SoccerJV2")

        assert record is not None
        assert record.external_embed_url == "https://player.twitch.tv/?channel=tchskisd"
        assert record.external_provider == ExternalProvider.TWITCH

    async def test_unknown_org_returns_none(self, beanie_db, directory: MongoChannelDirectory):
        await insert_org_with_channel()

        assert await directory.get_channel_by_org_and_slug("OTHERISD", "SoccerJV2") is None

    async def test_unknown_team_returns_none(self, beanie_db, directory: MongoChannelDirectory):
        await insert_org_with_channel()

        assert await directory.get_channel_by_org_and_slug("TCHSKISD", "SoccerVarsity") is None

    async def test_lookup_is_case_sensitive(self, beanie_db, directory: MongoChannelDirectory):
        await insert_org_with_channel()

        assert await directory.get_channel_by_org_and_slug("TCHSKISD", "soccerjv2") is None
        assert await directory.get_channel_by_org_and_slug("tchskisd", "SoccerJV2") is None
