"""Keyed one-way fingerprints of viewer network addresses."""

import hashlib
import hmac

from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode


def hash_ip(raw_address: str, secret: str) -> str:
    """HMAC-SHA256 of the address keyed by `secret`, hex encoded.

    The same address and secret always give the same fingerprint; without the
    secret, fingerprints from different deployments cannot be correlated.
    Only surrounding whitespace is stripped from the address.
    """
    if not secret:
        raise AppError(
            errcode=AppErrorCode.E_INVALID_CONFIG,
            errmesg="IP hash secret must not be empty",
            status_code=HttpStatusCode.INTERNAL_SERVER_ERROR,
        )

    return hmac.new(
        secret.encode("utf-8"),
        raw_address.strip().encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def fingerprints_match(expected: str, actual: str) -> bool:
    """Constant-time fingerprint comparison."""
    return hmac.compare_digest(expected, actual)
