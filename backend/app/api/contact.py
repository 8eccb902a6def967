"""Public contact form endpoint capturing leads."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from backend.app.core.errors import ValidationError
from backend.app.db.content_overrides_store import ContentOverridesStore
from backend.app.db.leads_store import LeadsStore
from backend.app.dependencies.services import get_content_overrides_store, get_leads_store
from backend.app.schemas.lead import ContactResponse
from backend.app.services.site_content import read_current_content
from backend.app.services.validation import validate_contact_payload
from backend.app.services.whatsapp import build_lead_whatsapp_message, build_whatsapp_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])

SUCCESS_MESSAGE = "Votre demande a bien ete envoyee. Vous pouvez maintenant poursuivre sur WhatsApp."


@router.post("/contact", status_code=status.HTTP_201_CREATED, response_model=ContactResponse)
async def submit_contact(
    payload: Any = Body(default=None),
    leads_store: LeadsStore = Depends(get_leads_store),
    overrides_store: ContentOverridesStore = Depends(get_content_overrides_store),
):
    content = await read_current_content(overrides_store)
    try:
        draft = validate_contact_payload(payload, content["reservation"])
    except ValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message)

    result = await leads_store.add(draft)
    if not result.persisted:
        # The visitor still gets a success: the lead lives in memory for this process.
        logger.warning("Lead %s accepted but not persisted: %s", result.value["id"], result.error)

    whatsapp_url = build_whatsapp_url(content, build_lead_whatsapp_message(content, result.value))
    return {
        "success": True,
        "message": SUCCESS_MESSAGE,
        "lead": result.value,
        "whatsappUrl": whatsapp_url,
    }
