"""Organization ODM schema."""

from datetime import datetime
from typing import Any

from beanie import Document, Indexed
from pydantic import Field, field_validator

from app.domain.utils.idgen import new_org_id

from .schema_utils import parse_mongo_datetime


class Organization(Document):
    """Broadcasting organization; its short name is the first watch-link segment."""

    org_id: Indexed(str, unique=True) = Field(default_factory=new_org_id)  # type: ignore[valid-type]
    short_name: Indexed(str, unique=True)  # type: ignore[valid-type]
    name: str
    owner_account_id: Indexed(str)  # type: ignore[valid-type]

    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_datetime(cls, v: Any) -> Any:
        return parse_mongo_datetime(v)

    class Settings:
        name = "organization"
