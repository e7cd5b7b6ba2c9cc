"""Beanie ODM schemas for MongoDB collections."""

from .channel import WatchChannel
from .event import WatchEvent
from .event_code import EventCode
from .init import DOCUMENT_MODELS, init_beanie_odm
from .organization import Organization
from .watch_enums import AccessMode, EventCodeStatus, EventState, ExternalProvider, StreamType

__all__ = [
    "AccessMode",
    "DOCUMENT_MODELS",
    "EventCode",
    "EventCodeStatus",
    "EventState",
    "ExternalProvider",
    "Organization",
    "StreamType",
    "WatchChannel",
    "WatchEvent",
    "init_beanie_odm",
]
