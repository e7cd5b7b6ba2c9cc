from ulid import ULID


def new_ulid(prefix: str | None = None) -> str:
    value = str(ULID()).lower()
    return f"{prefix}{value}" if prefix else value


def new_org_id() -> str:
    return new_ulid("org_")


def new_channel_id() -> str:
    return new_ulid("ch_")


def new_event_code_id() -> str:
    return new_ulid("ec_")


def new_event_id() -> str:
    return new_ulid("ev_")
