"""AI assistant endpoints proxying to the hosted chat-completion API."""

from fastapi import APIRouter, Depends, HTTPException

from backend.app.core.errors import AiAssistantError
from backend.app.dependencies.services import get_ai_assistant
from backend.app.schemas.ai import (
    AiAnswerResponse,
    AiCapabilitiesResponse,
    AssistRequest,
    NextCourseRequest,
    TutorRequest,
)
from backend.app.services.ai_assistant import (
    GENERIC_ERROR_MESSAGE,
    GUIDE_3_STEPS,
    NEXT_COURSE,
    REWRITE_EMAIL,
    TUTOR,
    UNAVAILABLE_MESSAGE,
    AiAssistant,
    AssistantReply,
)

router = APIRouter(prefix="/api/ai", tags=["ai"])


def _to_http_error(exc: AiAssistantError) -> HTTPException:
    if exc.status_code == 503:
        return HTTPException(status_code=503, detail=UNAVAILABLE_MESSAGE)
    if exc.status_code >= 500:
        return HTTPException(status_code=exc.status_code, detail=GENERIC_ERROR_MESSAGE)
    return HTTPException(status_code=exc.status_code, detail=exc.message or GENERIC_ERROR_MESSAGE)


def _answer(reply: AssistantReply) -> dict:
    return {"success": True, "answer": reply.answer, "model": reply.model, "intent": reply.intent}


@router.get("/capabilities", response_model=AiCapabilitiesResponse)
async def capabilities(assistant: AiAssistant = Depends(get_ai_assistant)):
    return assistant.capabilities()


@router.post("/tutor", response_model=AiAnswerResponse)
async def tutor(body: TutorRequest, assistant: AiAssistant = Depends(get_ai_assistant)):
    try:
        reply = await assistant.run(
            intent=body.intent or TUTOR,
            message=body.message,
            history=body.history,
            context=body.context,
        )
    except AiAssistantError as exc:
        raise _to_http_error(exc)
    return _answer(reply)


@router.post("/guide", response_model=AiAnswerResponse)
async def guide(body: AssistRequest, assistant: AiAssistant = Depends(get_ai_assistant)):
    try:
        reply = await assistant.run(intent=GUIDE_3_STEPS, message=body.message, context=body.context)
    except AiAssistantError as exc:
        raise _to_http_error(exc)
    return _answer(reply)


@router.post("/rewrite", response_model=AiAnswerResponse)
async def rewrite(body: AssistRequest, assistant: AiAssistant = Depends(get_ai_assistant)):
    try:
        reply = await assistant.run(intent=REWRITE_EMAIL, message=body.message, context=body.context)
    except AiAssistantError as exc:
        raise _to_http_error(exc)
    return _answer(reply)


@router.post("/next-course", response_model=AiAnswerResponse)
async def next_course(body: NextCourseRequest, assistant: AiAssistant = Depends(get_ai_assistant)):
    try:
        reply = await assistant.run(
            intent=NEXT_COURSE,
            objective=body.objective,
            completed_modules=body.completed_modules,
            context=body.context,
        )
    except AiAssistantError as exc:
        raise _to_http_error(exc)
    return _answer(reply)
