from fastapi import APIRouter, Depends, Path, Query

from app.api.public.dependency import ViewerIp
from app.api.public.schemas.base import ApiOut
from app.api.public.schemas.watch_link import WatchLinkOut
from app.domain.watch import WatchBootstrapParams, WatchLinkService

router = APIRouter(prefix="/public/watch-links", tags=["Watch Links"])

_watch_link_service: WatchLinkService | None = None


def get_watch_link_service() -> WatchLinkService:
    """Get the singleton WatchLinkService instance, built on first use."""
    global _watch_link_service
    if _watch_link_service is None:
        _watch_link_service = WatchLinkService.from_config()
    return _watch_link_service


@router.get("/{org_short_name}/{team_slug}")
async def get_watch_link(
    viewer_ip: ViewerIp,
    org_short_name: str = Path(..., min_length=1, max_length=64),
    team_slug: str = Path(..., min_length=1, max_length=64),
    code: str | None = Query(None, max_length=64, description="Event code"),
    service: WatchLinkService = Depends(get_watch_link_service),
) -> ApiOut[WatchLinkOut]:
    """Resolve a stable watch link to the channel's current stream."""
    descriptor = await service.get_public_bootstrap(
        WatchBootstrapParams(
            org_short_name=org_short_name,
            team_slug=team_slug,
            event_code=(code or "").strip() or None,
            viewer_ip=viewer_ip,
        )
    )

    return ApiOut[WatchLinkOut](results=WatchLinkOut(**descriptor.model_dump()))
