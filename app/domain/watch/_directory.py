"""Channel directory backed by the Organization and WatchChannel collections."""

from loguru import logger

from app.schemas import Organization, WatchChannel

from ._repositories import translate_store_errors
from .watch_models import WatchChannelRecord


class MongoChannelDirectory:
    """Resolves `{org}/{team}` to a channel: organization first, then team slug within it."""

    async def get_channel_by_org_and_slug(
        self,
        org_short_name: str,
        team_slug: str,
    ) -> WatchChannelRecord | None:
        with translate_store_errors("organization lookup"):
            org = await Organization.find_one(Organization.short_name == org_short_name)
        if not org:
            logger.debug(f"Organization not found: {org_short_name}")
            return None

        with translate_store_errors("channel lookup"):
            channel = await WatchChannel.find_one(
                WatchChannel.org_id == org.org_id,
                WatchChannel.team_slug == team_slug,
            )
        if not channel:
            logger.debug(f"Channel not found: {org_short_name}/{team_slug}")
            return None

        return to_channel_record(channel, org_short_name=org.short_name)


def to_channel_record(channel: WatchChannel, org_short_name: str | None = None) -> WatchChannelRecord:
    return WatchChannelRecord(
        channel_id=channel.channel_id,
        org_short_name=org_short_name or channel.org_short_name,
        team_slug=channel.team_slug,
        display_name=channel.display_name,
        require_event_code=channel.require_event_code,
        access_mode=channel.access_mode,
        price_cents=channel.price_cents,
        currency=channel.currency,
        stream_type=channel.stream_type,
        hls_manifest_url=channel.hls_manifest_url,
        mux_playback_id=channel.mux_playback_id,
        external_embed_url=channel.external_embed_url,
        external_provider=channel.external_provider,
    )
