# Prometheus API entrypoint: content, lead capture, admin and AI assistant routes.

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.api import admin_content
from backend.app.api import ai
from backend.app.api import contact
from backend.app.api import content
from backend.app.api import leads
from backend.app.api import login
from backend.app.core.logging_config import configure_logging
from backend.app.core.settings import get_settings
from backend.app.core.time import isoformat_z, utc_now
from backend.app.db.content_overrides_store import ContentOverridesStore
from backend.app.db.leads_store import LeadsStore
from backend.app.services.ai_assistant import AiAssistant

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    current = get_settings()
    app.state.leads_store = await LeadsStore(current.leads_persist_path).open()
    app.state.content_overrides_store = await ContentOverridesStore(current.content_overrides_path).open()
    # One assistant and one provider client for the app lifetime.
    app.state.ai_assistant = AiAssistant(
        api_key=current.openai_api_key,
        model=current.openai_model,
        timeout=current.openai_timeout_seconds,
    )
    try:
        yield
    finally:
        await app.state.ai_assistant.close()
        await app.state.leads_store.close()
        await app.state.content_overrides_store.close()


app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.frontend_origins,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"success": False, "message": "Requete invalide."})


app.include_router(content.router)
app.include_router(login.router)
app.include_router(leads.router)
app.include_router(admin_content.router)
app.include_router(contact.router)
app.include_router(ai.router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": settings.service_name, "timestamp": isoformat_z(utc_now())}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
