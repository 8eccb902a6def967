"""Admin lead listing."""

import logging

from fastapi import APIRouter, Depends

from backend.app.db.leads_store import LeadsStore
from backend.app.dependencies.auth import AdminAuth, require_admin
from backend.app.dependencies.services import get_leads_store
from backend.app.schemas.lead import AdminLeadsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/leads", response_model=AdminLeadsResponse)
async def list_leads(
    store: LeadsStore = Depends(get_leads_store),
    admin: AdminAuth = Depends(require_admin),
):
    await store.load_if_needed()
    leads = store.list()
    logger.info("Admin (%s) listed %d leads", admin.mode, len(leads))
    return {"success": True, "leads": leads}
