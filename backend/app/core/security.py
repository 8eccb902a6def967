"""Admin session tokens for Prometheus: stateless HMAC-SHA256 signed credentials.

A token is ``base64url(json payload) + "." + base64url(signature)``. The payload
carries the fixed ``admin`` role and an ``exp`` claim in epoch milliseconds, so
tokens expire on their own and nothing is stored server side.
"""

import base64
import binascii
import hashlib
import hmac
import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from backend.app.core.time import from_epoch_ms, isoformat_z, to_epoch_ms, utc_now

ADMIN_ROLE = "admin"
DEFAULT_TTL_HOURS = 12


@dataclass(frozen=True)
class AdminSession:
    token: str
    expires_at: str


@dataclass(frozen=True)
class TokenVerification:
    valid: bool
    expires_at: Optional[str] = None


INVALID = TokenVerification(valid=False)


def _b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64url_decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


def _sign(payload: str, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).digest()
    return _b64url_encode(digest)


def constant_time_equals(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def create_admin_session_token(
    secret: str, ttl_hours: float = DEFAULT_TTL_HOURS, now: Optional[datetime] = None
) -> AdminSession:
    if not secret:
        raise ValueError("An admin session secret is required")
    issued_at = now or utc_now()
    expires = issued_at + timedelta(hours=max(1, ttl_hours))
    exp = to_epoch_ms(expires)
    payload = _b64url_encode(json.dumps({"role": ADMIN_ROLE, "exp": exp}, separators=(",", ":")).encode("utf-8"))
    return AdminSession(token=f"{payload}.{_sign(payload, secret)}", expires_at=isoformat_z(from_epoch_ms(exp)))


def verify_admin_session_token(
    token: Optional[str], secret: Optional[str], now: Optional[datetime] = None
) -> TokenVerification:
    # Every failure returns the same INVALID value so callers cannot tell why.
    if not token or not secret:
        return INVALID

    parts = str(token).split(".")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return INVALID
    payload, signature = parts
    if not constant_time_equals(signature, _sign(payload, secret)):
        return INVALID

    try:
        decoded = json.loads(_b64url_decode(payload).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return INVALID
    if not isinstance(decoded, dict):
        return INVALID

    exp = decoded.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)) or exp <= 0:
        return INVALID
    if to_epoch_ms(now or utc_now()) >= exp:
        return INVALID
    if decoded.get("role") != ADMIN_ROLE:
        return INVALID

    try:
        expires_at = isoformat_z(from_epoch_ms(exp))
    except (OverflowError, OSError, ValueError):
        return INVALID
    return TokenVerification(valid=True, expires_at=expires_at)
