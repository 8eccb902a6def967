"""Request and response bodies for the AI assistant endpoints.

Request fields are loosely typed on purpose: the assistant service sanitizes
whatever the browser sends and reports missing fields itself.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TutorRequest(BaseModel):
    message: Any = None
    history: Any = None
    context: Any = None
    intent: Optional[str] = None


class AssistRequest(BaseModel):
    message: Any = None
    context: Any = None


class NextCourseRequest(BaseModel):
    objective: Any = None
    completed_modules: Any = Field(default=None, alias="completedModules")
    context: Any = None

    model_config = ConfigDict(populate_by_name=True)


class AiAnswerResponse(BaseModel):
    success: bool = True
    answer: str
    model: str
    intent: str


class AiCapabilitiesResponse(BaseModel):
    available: bool
    provider: str
    model: str
    intents: list[str]
