"""Public content endpoints."""

from fastapi import APIRouter, Depends

from backend.app.db.content_overrides_store import ContentOverridesStore
from backend.app.dependencies.services import get_content_overrides_store
from backend.app.services.site_content import read_current_content

router = APIRouter(prefix="/api", tags=["content"])


@router.get("/content")
async def get_content(store: ContentOverridesStore = Depends(get_content_overrides_store)):
    return await read_current_content(store)


@router.get("/pricing")
async def get_pricing(store: ContentOverridesStore = Depends(get_content_overrides_store)):
    content = await read_current_content(store)
    return content["pricing"]
