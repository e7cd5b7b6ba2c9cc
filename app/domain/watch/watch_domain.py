"""Watch link service - resolves stable watch links to the current stream source."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from loguru import logger
from pydantic import BaseModel

from app.app_config import AppEnvironConfig, get_app_environ_config
from app.shared.domain.time_utils import utc_now
from app.schemas.watch_enums import StreamType
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from ._directory import MongoChannelDirectory
from ._event_codes import MongoEventCodeStore
from ._events import MongoEventReader
from ._repositories import (
    ChannelDirectory,
    EventCodeReader,
    EventCodeWriter,
    EventReader,
    StoreUnavailableError,
)
from .binding_state import BindingState, BindingStateMachine
from .ip_fingerprint import fingerprints_match, hash_ip
from .watch_models import (
    EventCodeRecord,
    PlaybackDescriptor,
    WatchBootstrapParams,
    WatchChannelRecord,
    WatchEventRecord,
)

T = TypeVar("T")


class WatchLinkServiceOptions(BaseModel):
    ip_hash_secret: str
    enforce_ip_binding_when_code_provided: bool = True
    store_timeout_seconds: float = 5.0
    mux_stream_base_url: str = "https://stream.mux.com"


class WatchLinkService:
    """Watch-link resolver with optional one-network binding of event codes."""

    def __init__(
        self,
        directory: ChannelDirectory,
        event_code_reader: EventCodeReader,
        event_code_writer: EventCodeWriter,
        event_reader: EventReader,
        options: WatchLinkServiceOptions,
    ):
        if not options.ip_hash_secret:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_CONFIG,
                errmesg="WATCH_IP_HASH_SECRET must be configured",
                status_code=HttpStatusCode.INTERNAL_SERVER_ERROR,
            )

        self._directory = directory
        self._event_code_reader = event_code_reader
        self._event_code_writer = event_code_writer
        self._event_reader = event_reader
        self._options = options

    @classmethod
    def from_config(cls, app_config: AppEnvironConfig | None = None) -> "WatchLinkService":
        """Build the service on the MongoDB stores using application configuration."""
        app_config = app_config or get_app_environ_config()
        event_codes = MongoEventCodeStore()

        return cls(
            directory=MongoChannelDirectory(),
            event_code_reader=event_codes,
            event_code_writer=event_codes,
            event_reader=MongoEventReader(),
            options=WatchLinkServiceOptions(
                ip_hash_secret=app_config.WATCH_IP_HASH_SECRET or "",
                enforce_ip_binding_when_code_provided=app_config.ENFORCE_IP_BINDING_WHEN_CODE_PROVIDED,
                store_timeout_seconds=app_config.WATCH_STORE_TIMEOUT_SECONDS,
                mux_stream_base_url=app_config.MUX_STREAM_BASE_URL,
            ),
        )

    async def get_public_bootstrap(self, params: WatchBootstrapParams) -> PlaybackDescriptor:
        """
        Resolve `{org}/{team}[?code=...]` to a playback descriptor.

        Raises AppError:
            E_WATCH_LINK_NOT_FOUND (404): no such org/team channel
            E_EVENT_CODE_REQUIRED (401): channel requires a code and none was given
            E_EVENT_CODE_INVALID (401): unknown, revoked or expired code
            E_EVENT_CODE_BOUND_ELSEWHERE (403): code bound to another network
            E_VIEWER_IP_UNAVAILABLE (400): binding enforced but no viewer address
            E_STORE_UNAVAILABLE (503): backing store unreachable or timed out
            E_STREAM_NOT_CONFIGURED (409): channel stream fields incomplete
        """
        channel = await self._call_store(
            "channel lookup",
            self._directory.get_channel_by_org_and_slug(params.org_short_name, params.team_slug),
        )
        if not channel:
            raise AppError(
                errcode=AppErrorCode.E_WATCH_LINK_NOT_FOUND,
                errmesg="Watch link not found",
                status_code=HttpStatusCode.NOT_FOUND,
            )

        if channel.require_event_code and not params.event_code:
            raise AppError(
                errcode=AppErrorCode.E_EVENT_CODE_REQUIRED,
                errmesg="Event code required",
                status_code=HttpStatusCode.UNAUTHORIZED,
            )

        if params.event_code:
            if self._options.enforce_ip_binding_when_code_provided:
                await self._enforce_event_code_binding(channel, params.event_code, params.viewer_ip)
            else:
                await self._get_active_event_code(channel, params.event_code)

        event = await self._call_store(
            "upcoming event lookup",
            self._event_reader.find_upcoming_event(channel.channel_id, utc_now()),
        )

        return self._to_descriptor(channel, event)

    async def _enforce_event_code_binding(
        self,
        channel: WatchChannelRecord,
        event_code: str,
        viewer_ip: str | None,
    ) -> None:
        if not viewer_ip or not viewer_ip.strip():
            raise AppError(
                errcode=AppErrorCode.E_VIEWER_IP_UNAVAILABLE,
                errmesg="Viewer IP unavailable",
                status_code=HttpStatusCode.BAD_REQUEST,
            )

        record = await self._get_active_event_code(channel, event_code)
        requester_hash = hash_ip(viewer_ip, self._options.ip_hash_secret)

        if BindingStateMachine.can_transition(BindingStateMachine.state_of(record), BindingState.BOUND):
            bound = await self._call_store(
                "event code bind",
                self._event_code_writer.bind_to_fingerprint(
                    record.event_code_id, requester_hash, utc_now()
                ),
            )
            if bound:
                logger.info(
                    f"Event code {record.event_code_id} on channel {channel.channel_id} "
                    f"bound to fingerprint {requester_hash[:8]}"
                )
                return

            # Lost a concurrent first-use race: judge against the winning binding
            record = await self._reload_bound_event_code(channel, record)

        if not fingerprints_match(record.bound_ip_hash or "", requester_hash):
            logger.warning(
                f"Event code {record.event_code_id} on channel {channel.channel_id} "
                f"rejected for fingerprint {requester_hash[:8]}"
            )
            raise AppError(
                errcode=AppErrorCode.E_EVENT_CODE_BOUND_ELSEWHERE,
                errmesg="This event code is already in use from another network",
                status_code=HttpStatusCode.FORBIDDEN,
            )

    async def _get_active_event_code(
        self,
        channel: WatchChannelRecord,
        event_code: str,
    ) -> EventCodeRecord:
        record = await self._call_store(
            "event code lookup",
            self._event_code_reader.find_by_channel_and_code(channel.channel_id, event_code),
        )
        # Unknown and inactive codes are reported identically
        if not record or not record.is_active:
            raise AppError(
                errcode=AppErrorCode.E_EVENT_CODE_INVALID,
                errmesg="Invalid event code",
                status_code=HttpStatusCode.UNAUTHORIZED,
            )
        return record

    async def _reload_bound_event_code(
        self,
        channel: WatchChannelRecord,
        stale: EventCodeRecord,
    ) -> EventCodeRecord:
        record = await self._get_active_event_code(channel, stale.code)
        if not BindingStateMachine.is_terminal(BindingStateMachine.state_of(record)):
            raise AppError(
                errcode=AppErrorCode.E_STORE_UNAVAILABLE,
                errmesg="Event code binding could not be confirmed, please retry",
                status_code=HttpStatusCode.SERVICE_UNAVAILABLE,
            )
        return record

    async def _call_store(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._options.store_timeout_seconds)
        except (asyncio.TimeoutError, StoreUnavailableError) as e:
            logger.warning(f"Watch link store unavailable during {operation}: {type(e).__name__}")
            raise AppError(
                errcode=AppErrorCode.E_STORE_UNAVAILABLE,
                errmesg="Watch link service temporarily unavailable, please retry",
                status_code=HttpStatusCode.SERVICE_UNAVAILABLE,
            ) from e

    def _to_descriptor(
        self,
        channel: WatchChannelRecord,
        event: WatchEventRecord | None = None,
    ) -> PlaybackDescriptor:
        base = {
            "channel_id": channel.channel_id,
            "org_short_name": channel.org_short_name,
            "team_slug": channel.team_slug,
            "display_name": channel.display_name,
            "access_mode": channel.access_mode,
            "price_cents": channel.price_cents,
            "currency": channel.currency,
            "event_id": event.event_id if event else None,
            "event_starts_at": event.starts_at if event else None,
            "event_title": (event.title or f"{channel.org_short_name} {channel.team_slug}") if event else None,
        }

        if channel.stream_type == StreamType.MUX_PLAYBACK:
            if not channel.mux_playback_id:
                raise self._stream_not_configured(channel, "Missing playback ID")
            return PlaybackDescriptor(
                **base,
                player_type="hls",
                stream_url=f"{self._options.mux_stream_base_url.rstrip('/')}/{channel.mux_playback_id}.m3u8",
            )

        if channel.stream_type == StreamType.BYO_HLS:
            if not channel.hls_manifest_url:
                raise self._stream_not_configured(channel, "Missing HLS manifest URL")
            return PlaybackDescriptor(
                **base,
                player_type="hls",
                stream_url=channel.hls_manifest_url,
            )

        if channel.stream_type == StreamType.EXTERNAL_EMBED:
            if not channel.external_embed_url:
                raise self._stream_not_configured(channel, "Missing embed URL")
            return PlaybackDescriptor(
                **base,
                player_type="embed",
                stream_url=channel.external_embed_url,
                provider=channel.external_provider,
            )

        raise self._stream_not_configured(channel, f"Unsupported stream type: {channel.stream_type}")

    @staticmethod
    def _stream_not_configured(channel: WatchChannelRecord, reason: str) -> AppError:
        logger.error(f"Channel {channel.channel_id} stream misconfigured: {reason}")
        return AppError(
            errcode=AppErrorCode.E_STREAM_NOT_CONFIGURED,
            errmesg=reason,
            status_code=HttpStatusCode.CONFLICT,
        )
