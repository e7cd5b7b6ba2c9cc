from typing import Annotated

from fastapi import Depends, Request

from app.app_config import AppEnvironConfig, get_app_environ_config


def extract_viewer_ip(request: Request, trust_proxy_headers: bool) -> str | None:
    """Viewer address: first X-Forwarded-For hop when proxies are trusted, else the socket peer."""
    if trust_proxy_headers:
        forwarded_for = request.headers.get("x-forwarded-for") or ""
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    if request.client and request.client.host:
        return request.client.host
    return None


async def get_viewer_ip(
    request: Request,
    app_config: AppEnvironConfig = Depends(get_app_environ_config),
) -> str | None:
    return extract_viewer_ip(request, app_config.TRUST_PROXY_HEADERS)


ViewerIp = Annotated[str | None, Depends(get_viewer_ip)]
