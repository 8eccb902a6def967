"""Dependencies handing route functions the app-scoped stores and AI client."""

from fastapi import Request

from backend.app.db.content_overrides_store import ContentOverridesStore
from backend.app.db.leads_store import LeadsStore
from backend.app.services.ai_assistant import AiAssistant


def get_leads_store(request: Request) -> LeadsStore:
    return request.app.state.leads_store


def get_content_overrides_store(request: Request) -> ContentOverridesStore:
    return request.app.state.content_overrides_store


def get_ai_assistant(request: Request) -> AiAssistant:
    return request.app.state.ai_assistant
