"""Broadcast event ODM schema."""

from datetime import datetime
from typing import Any

from beanie import Document, Indexed
from pydantic import Field, field_validator
from pymongo import ASCENDING, IndexModel

from app.domain.utils.idgen import new_event_id

from .schema_utils import parse_mongo_datetime
from .watch_enums import EventState


class WatchEvent(Document):
    """A scheduled broadcast on a channel."""

    event_id: Indexed(str, unique=True) = Field(default_factory=new_event_id)  # type: ignore[valid-type]
    channel_id: str
    org_id: str
    title: str | None = None
    starts_at: datetime
    state: EventState = EventState.SCHEDULED

    created_at: datetime
    updated_at: datetime

    @field_validator("starts_at", "created_at", "updated_at", mode="before")
    @classmethod
    def _parse_datetime(cls, v: Any) -> Any:
        return parse_mongo_datetime(v)

    class Settings:
        name = "watch_event"
        indexes = [
            IndexModel([("channel_id", ASCENDING), ("starts_at", ASCENDING)]),
        ]
