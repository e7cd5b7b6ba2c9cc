"""Event code ODM schema."""

from datetime import datetime
from typing import Any

from beanie import Document, Indexed
from pydantic import Field, field_validator, model_validator
from pymongo import ASCENDING, IndexModel

from app.domain.utils.idgen import new_event_code_id

from .schema_utils import parse_mongo_datetime
from .watch_enums import EventCodeStatus


class EventCode(Document):
    """Shared access code for a channel's broadcast.

    `bound_ip_hash` and `bound_at` are set together, once, by the first
    resolution that uses the code; they are never cleared by this service.
    """

    event_code_id: Indexed(str, unique=True) = Field(default_factory=new_event_code_id)  # type: ignore[valid-type]
    channel_id: str
    code: str  # case-sensitive
    status: EventCodeStatus = EventCodeStatus.ACTIVE

    bound_ip_hash: str | None = None
    bound_at: datetime | None = None

    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", "bound_at", mode="before")
    @classmethod
    def _parse_datetime(cls, v: Any) -> Any:
        return parse_mongo_datetime(v)

    @model_validator(mode="after")
    def _check_binding_pair(self) -> "EventCode":
        if (self.bound_ip_hash is None) != (self.bound_at is None):
            raise ValueError("bound_ip_hash and bound_at must be set together")
        return self

    class Settings:
        name = "event_code"
        indexes = [
            IndexModel([("channel_id", ASCENDING), ("code", ASCENDING)], unique=True),
        ]
