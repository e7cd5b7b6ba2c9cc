"""Watch channel ODM schema."""

from datetime import datetime
from typing import Any

from beanie import Document, Indexed
from pydantic import Field, field_validator
from pymongo import ASCENDING, IndexModel

from app.domain.utils.idgen import new_channel_id

from .schema_utils import parse_mongo_datetime
from .watch_enums import AccessMode, ExternalProvider, StreamType


class WatchChannel(Document):
    """Team channel behind a stable `{org}/{team}` watch link.

    Only the stream field matching `stream_type` is expected to be set:
    `hls_manifest_url` for BYO_HLS, `mux_playback_id` for MUX_PLAYBACK,
    `external_embed_url` + `external_provider` for EXTERNAL_EMBED.
    """

    channel_id: Indexed(str, unique=True) = Field(default_factory=new_channel_id)  # type: ignore[valid-type]
    org_id: str
    org_short_name: str  # denormalized from Organization.short_name
    team_slug: str
    display_name: str | None = None

    require_event_code: bool = False

    # Monetization fields surfaced to viewers; payment is handled elsewhere
    access_mode: AccessMode = AccessMode.PUBLIC_FREE
    price_cents: int | None = None
    currency: str | None = None

    # Current stream source
    stream_type: StreamType
    hls_manifest_url: str | None = None
    mux_playback_id: str | None = None
    external_embed_url: str | None = None
    external_provider: ExternalProvider | None = None

    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_datetime(cls, v: Any) -> Any:
        return parse_mongo_datetime(v)

    class Settings:
        name = "watch_channel"
        indexes = [
            IndexModel([("org_id", ASCENDING), ("team_slug", ASCENDING)], unique=True),
        ]
