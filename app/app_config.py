from pydantic import BaseModel

from app.shared.config import config


class AppEnvironConfig(BaseModel):
    DEBUG: bool = config.get_bool("DEBUG", False)

    # Server
    API_HOST: str = (config.get("API_HOST") or "").strip() or "0.0.0.0"
    API_PORT: int = int((config.get("API_PORT") or "").strip() or 8000)
    API_WORKERS: int = int((config.get("API_WORKERS") or "").strip() or 1)
    API_CORS_ORIGINS: list[str] = [
        x.strip() for x in (config.get("API_CORS_ORIGINS") or "*").split(",") if x.strip()
    ]

    # Storage label used for every watch-link collection
    WATCH_MONGO_LABEL: str = (config.get("WATCH_MONGO_LABEL") or "").strip() or "watch_primary"
    # Upper bound for a single round trip to the backing store
    WATCH_STORE_TIMEOUT_SECONDS: float = float(
        (config.get("WATCH_STORE_TIMEOUT_SECONDS") or "").strip() or 5
    )

    # Event code binding
    WATCH_IP_HASH_SECRET: str | None = (config.get("WATCH_IP_HASH_SECRET") or "").strip() or None
    ENFORCE_IP_BINDING_WHEN_CODE_PROVIDED: bool = config.get_bool(
        "ENFORCE_IP_BINDING_WHEN_CODE_PROVIDED", True
    )
    # When True, the viewer address is taken from X-Forwarded-For instead of the socket peer
    TRUST_PROXY_HEADERS: bool = config.get_bool("TRUST_PROXY_HEADERS", False)

    # Mux configuration
    MUX_STREAM_BASE_URL: str = (
        (config.get("MUX_STREAM_BASE_URL") or "").strip() or "https://stream.mux.com"
    ).rstrip("/")

    # Observability
    LOGFIRE_ENABLE: bool = config.get_bool("LOGFIRE_ENABLE", False)
    LOGFIRE_TOKEN: str | None = (config.get("LOGFIRE_TOKEN") or "").strip() or None


_app_environ_config = AppEnvironConfig()


def get_app_environ_config() -> AppEnvironConfig:
    return _app_environ_config
