"""Admin authentication dependencies: static admin key or signed session token."""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from backend.app.core.security import constant_time_equals, verify_admin_session_token
from backend.app.core.settings import Settings, get_settings
from backend.app.services.validation import sanitize_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminAuth:
    mode: str
    expires_at: Optional[str] = None


def require_admin_configured(settings: Settings = Depends(get_settings)) -> Settings:
    # Without an admin key the admin area does not exist at all.
    if not settings.admin_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found.")
    return settings


def _bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        return ""
    return authorization[len("Bearer "):].strip()


def require_admin(
    settings: Settings = Depends(require_admin_configured),
    x_admin_key: str | None = Header(default=None),
    authorization: str | None = Header(default=None),
) -> AdminAuth:
    # Accept either the x-admin-key header or Authorization: Bearer <session token>
    provided_key = sanitize_text(x_admin_key, 500)
    if provided_key and constant_time_equals(provided_key, settings.admin_api_key):
        return AdminAuth(mode="key")

    verification = verify_admin_session_token(_bearer_token(authorization), settings.admin_session_secret)
    if verification.valid:
        return AdminAuth(mode="session", expires_at=verification.expires_at)

    logger.info("Rejected admin request without valid credentials")
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized.")
