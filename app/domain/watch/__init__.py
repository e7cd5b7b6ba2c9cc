"""Watch-link resolution and event-code binding."""

from ._repositories import (
    ChannelDirectory,
    EventCodeReader,
    EventCodeWriter,
    EventReader,
    StoreUnavailableError,
)
from .watch_domain import WatchLinkService, WatchLinkServiceOptions
from .watch_models import (
    EventCodeRecord,
    PlaybackDescriptor,
    WatchBootstrapParams,
    WatchChannelRecord,
    WatchEventRecord,
)

__all__ = [
    "ChannelDirectory",
    "EventCodeReader",
    "EventCodeRecord",
    "EventCodeWriter",
    "EventReader",
    "PlaybackDescriptor",
    "StoreUnavailableError",
    "WatchBootstrapParams",
    "WatchChannelRecord",
    "WatchEventRecord",
    "WatchLinkService",
    "WatchLinkServiceOptions",
]
