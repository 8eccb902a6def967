"""Admin view and replacement of the content image overrides."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from backend.app.db.content_overrides_store import ContentOverridesStore
from backend.app.dependencies.auth import AdminAuth, require_admin
from backend.app.dependencies.services import get_content_overrides_store
from backend.app.schemas.content import AdminContentResponse
from backend.app.services.site_content import read_current_content

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/content", response_model=AdminContentResponse)
async def get_admin_content(
    store: ContentOverridesStore = Depends(get_content_overrides_store),
    admin: AdminAuth = Depends(require_admin),
):
    await store.load_if_needed()
    logger.debug("Admin (%s) read content overrides", admin.mode)
    return {"success": True, "overrides": store.get(), "content": await read_current_content(store)}


@router.put("/content", response_model=AdminContentResponse)
async def replace_admin_content(
    payload: Any = Body(default=None),
    store: ContentOverridesStore = Depends(get_content_overrides_store),
    admin: AdminAuth = Depends(require_admin),
):
    # The admin UI resends its full draft; anything omitted loses its override.
    result = await store.replace(payload if payload is not None else {})
    if not result.persisted:
        logger.warning("Content overrides updated in memory only: %s", result.error)
    logger.info("Admin (%s) replaced content overrides", admin.mode)
    return {"success": True, "overrides": result.value, "content": await read_current_content(store)}
