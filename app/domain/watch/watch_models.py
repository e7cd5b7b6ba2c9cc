"""Watch-link domain models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from app.schemas.watch_enums import AccessMode, EventCodeStatus, EventState, ExternalProvider, StreamType


class WatchChannelRecord(BaseModel):
    """Channel configuration as seen by the resolver."""

    channel_id: str
    org_short_name: str
    team_slug: str
    display_name: str | None = None
    require_event_code: bool = False
    access_mode: AccessMode = AccessMode.PUBLIC_FREE
    price_cents: int | None = None
    currency: str | None = None
    stream_type: StreamType
    hls_manifest_url: str | None = None
    mux_playback_id: str | None = None
    external_embed_url: str | None = None
    external_provider: ExternalProvider | None = None


class EventCodeRecord(BaseModel):
    """Event code state as seen by the resolver."""

    event_code_id: str
    channel_id: str
    code: str
    status: EventCodeStatus
    bound_ip_hash: str | None = None
    bound_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == EventCodeStatus.ACTIVE

    @property
    def is_bound(self) -> bool:
        return self.bound_ip_hash is not None


class WatchEventRecord(BaseModel):
    """Scheduled or live broadcast as seen by the resolver."""

    event_id: str
    channel_id: str
    title: str | None = None
    starts_at: datetime
    state: EventState


class WatchBootstrapParams(BaseModel):
    """Parameters for resolving a watch link."""

    org_short_name: str
    team_slug: str
    event_code: str | None = None
    viewer_ip: str | None = None


class PlaybackDescriptor(BaseModel):
    """How a viewer plays a channel's current stream."""

    channel_id: str
    org_short_name: str
    team_slug: str
    display_name: str | None = None
    access_mode: AccessMode
    price_cents: int | None = None
    currency: str | None = None
    player_type: Literal["hls", "embed"]
    stream_url: str
    provider: ExternalProvider | None = None

    # Earliest upcoming scheduled or live event, when there is one
    event_id: str | None = None
    event_starts_at: datetime | None = None
    event_title: str | None = None
