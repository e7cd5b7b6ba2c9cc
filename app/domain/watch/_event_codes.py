"""Event code store backed by the EventCode collection."""

from datetime import datetime

from beanie.odm.operators.update.general import Set
from loguru import logger

from app.schemas import EventCode

from ._repositories import translate_store_errors
from .watch_models import EventCodeRecord


class MongoEventCodeStore:
    """Reads event codes and binds them with a single conditional update.

    The bind filters on `bound_ip_hash == None`, so MongoDB's document-level
    atomicity makes it a compare-and-set: of several racing binds exactly one
    modifies the document, the rest match nothing.
    """

    async def find_by_channel_and_code(
        self,
        channel_id: str,
        code: str,
    ) -> EventCodeRecord | None:
        with translate_store_errors("event code lookup"):
            event_code = await EventCode.find_one(
                EventCode.channel_id == channel_id,
                EventCode.code == code,
            )
        if not event_code:
            return None

        return to_event_code_record(event_code)

    async def bind_to_fingerprint(
        self,
        event_code_id: str,
        fingerprint: str,
        bound_at: datetime,
    ) -> bool:
        with translate_store_errors("event code bind"):
            result = await EventCode.find(
                EventCode.event_code_id == event_code_id,
                EventCode.bound_ip_hash == None,  # noqa: E711
            ).update(
                Set(
                    {
                        EventCode.bound_ip_hash: fingerprint,
                        EventCode.bound_at: bound_at,
                        EventCode.updated_at: bound_at,
                    }
                )
            )  # type: ignore[arg-type]

        bound = bool(result and result.modified_count > 0)
        if not bound:
            logger.info(f"Event code {event_code_id} was already bound, bind skipped")
        return bound


def to_event_code_record(event_code: EventCode) -> EventCodeRecord:
    return EventCodeRecord(
        event_code_id=event_code.event_code_id,
        channel_id=event_code.channel_id,
        code=event_code.code,
        status=event_code.status,
        bound_ip_hash=event_code.bound_ip_hash,
        bound_at=event_code.bound_at,
    )
