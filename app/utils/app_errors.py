"""Application error type and error code catalogue."""

import inspect
from enum import Enum, IntEnum
from uuid import uuid4


class AppErrorCode(str, Enum):
    E_INTERNAL_ERROR = "E_INTERNAL_ERROR"
    E_INVALID_CONFIG = "E_INVALID_CONFIG"

    # Watch links
    E_WATCH_LINK_NOT_FOUND = "E_WATCH_LINK_NOT_FOUND"
    E_STREAM_NOT_CONFIGURED = "E_STREAM_NOT_CONFIGURED"

    # Event codes
    E_EVENT_CODE_REQUIRED = "E_EVENT_CODE_REQUIRED"
    E_EVENT_CODE_INVALID = "E_EVENT_CODE_INVALID"
    E_EVENT_CODE_BOUND_ELSEWHERE = "E_EVENT_CODE_BOUND_ELSEWHERE"
    E_VIEWER_IP_UNAVAILABLE = "E_VIEWER_IP_UNAVAILABLE"

    # Backing store
    E_STORE_UNAVAILABLE = "E_STORE_UNAVAILABLE"

    def __str__(self) -> str:
        return self.value


class HttpStatusCode(IntEnum):
    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


class AppError(Exception):
    """Error raised by domain code and rendered by the API error handler.

    `erresid` identifies this occurrence in logs and in the response body;
    `caller_info` records where the error was raised.
    """

    def __init__(
        self,
        errcode: AppErrorCode | str,
        errmesg: str,
        status_code: HttpStatusCode | int = HttpStatusCode.BAD_REQUEST,
    ):
        self.errcode = errcode.value if isinstance(errcode, AppErrorCode) else str(errcode)
        self.errmesg = errmesg
        self.status_code = int(status_code)
        self.erresid = uuid4().hex[:10]

        caller_frame = inspect.stack()[1]
        module = inspect.getmodule(caller_frame.frame)
        module_name = module.__name__ if module else caller_frame.filename
        self.caller_info = f"{module_name}:{caller_frame.function}:{caller_frame.lineno}"

        super().__init__(f"{self.errcode}: {errmesg}")

    @property
    def retryable(self) -> bool:
        """Whether the caller may safely retry the same request later."""
        return self.status_code == HttpStatusCode.SERVICE_UNAVAILABLE


__all__ = ["AppError", "AppErrorCode", "HttpStatusCode"]
