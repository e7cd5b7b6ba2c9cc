from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from app.schemas.watch_enums import AccessMode, ExternalProvider


class WatchLinkOut(BaseModel):
    """Playback bootstrap returned to the watch page."""

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
    event_id: str | None = None
    event_starts_at: datetime | None = None
    event_title: str | None = None
