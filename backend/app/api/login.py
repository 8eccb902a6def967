"""Admin login endpoint issuing signed session tokens."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.core.security import constant_time_equals, create_admin_session_token
from backend.app.core.settings import Settings
from backend.app.dependencies.auth import require_admin_configured
from backend.app.schemas.login import AdminLoginRequest, AdminLoginResponse
from backend.app.services.validation import sanitize_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/login", response_model=AdminLoginResponse)
def login(credentials: AdminLoginRequest, settings: Settings = Depends(require_admin_configured)):
    password = sanitize_text(credentials.password, 500)
    if not password or not constant_time_equals(password, settings.admin_api_key):
        logger.info("Admin login failed")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Identifiants invalides.")

    session = create_admin_session_token(settings.admin_session_secret, settings.admin_session_ttl_hours)
    logger.info("Admin session issued, expires at %s", session.expires_at)
    return {"success": True, "token": session.token, "expiresAt": session.expires_at}
