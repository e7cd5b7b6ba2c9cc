"""Enums shared by the watch-link documents."""

from enum import Enum


class StreamType(str, Enum):
    """Where a channel's current stream comes from."""

    BYO_HLS = "byo_hls"
    MUX_PLAYBACK = "mux_playback"
    EXTERNAL_EMBED = "external_embed"

    def __str__(self) -> str:
        return self.value


class ExternalProvider(str, Enum):
    YOUTUBE = "youtube"
    TWITCH = "twitch"
    VIMEO = "vimeo"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class AccessMode(str, Enum):
    PUBLIC_FREE = "public_free"
    PAY_PER_VIEW = "pay_per_view"

    def __str__(self) -> str:
        return self.value


class EventCodeStatus(str, Enum):
    """Event code lifecycle status.

    Only ACTIVE codes grant access. REVOKED and EXPIRED are set by owner
    tooling and are reported to viewers exactly like an unknown code.
    """

    ACTIVE = "active"
    REVOKED = "revoked"
    EXPIRED = "expired"

    def __str__(self) -> str:
        return self.value


class EventState(str, Enum):
    """Broadcast event lifecycle; only SCHEDULED and LIVE events are surfaced to viewers."""

    SCHEDULED = "scheduled"
    LIVE = "live"
    ENDED = "ended"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


__all__ = ["AccessMode", "EventCodeStatus", "EventState", "ExternalProvider", "StreamType"]
