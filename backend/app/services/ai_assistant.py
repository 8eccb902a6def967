"""Prompt building and chat-completion calls for the Prometheus AI assistant.

The assistant answers in French for four intents: free tutoring with a short
conversation history, a three-step guide, email rewriting, and a next-course
recommendation. Input is sanitized before it is placed in the prompt.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import openai
from openai import AsyncOpenAI

from backend.app.core.errors import AiAssistantError
from backend.app.services.validation import sanitize_text

logger = logging.getLogger(__name__)

PROVIDER = "openai"

SYSTEM_PROMPT = """Tu es Promethee, un assistant informatique francophone, calme et utile.
Tu aides des particuliers, etudiants, independants et petites equipes.
Regles:
- Reponds en francais simple.
- Evite le jargon inutile.
- Structure les reponses en etapes numerotees quand cela aide.
- Reste concret et oriente execution.
- Signale quand une verification humaine reste necessaire.
- Termine si possible par une prochaine action claire."""

TUTOR = "tutor"
GUIDE_3_STEPS = "guide_3_steps"
REWRITE_EMAIL = "rewrite_email"
NEXT_COURSE = "next_course"
SUPPORTED_INTENTS = (TUTOR, GUIDE_3_STEPS, REWRITE_EMAIL, NEXT_COURSE)

HISTORY_LIMIT = 6
HISTORY_ENTRY_MAX_LENGTH = 1500
MESSAGE_MAX_LENGTH = 2000
OBJECTIVE_MAX_LENGTH = 800
MODULE_MAX_LENGTH = 120
MODULES_LIMIT = 8
MAX_TOKENS = 500

TOPIC_KEYWORDS = (
    ("excel", "Excel"),
    ("word", "Word"),
    ("powerpoint", "PowerPoint"),
    ("cv", "CV et candidature"),
    ("document", "documents et rapports"),
    ("ia", "outils IA et productivite"),
    ("reservation", "devis et reservation"),
)
DEFAULT_TOPIC = "accompagnement informatique general"

UNAVAILABLE_MESSAGE = "Assistant IA indisponible: configurez OPENAI_API_KEY sur le backend."
GENERIC_ERROR_MESSAGE = "Erreur IA temporaire."


@dataclass(frozen=True)
class AssistantReply:
    answer: str
    model: str
    intent: str
    usage: Optional[dict] = None


def get_supported_intents() -> list[str]:
    return list(SUPPORTED_INTENTS)


def infer_topic(context: Any) -> str:
    value = str(context or "").lower()
    for keyword, topic in TOPIC_KEYWORDS:
        if keyword in value:
            return topic
    return DEFAULT_TOPIC


def sanitize_history(history: Any) -> list[dict]:
    if not isinstance(history, list):
        return []
    entries = [
        entry
        for entry in history
        if isinstance(entry, dict)
        and entry.get("role") in ("user", "assistant")
        and isinstance(entry.get("content"), str)
    ]
    return [
        {"role": entry["role"], "content": sanitize_text(entry["content"], HISTORY_ENTRY_MAX_LENGTH, multiline=True)}
        for entry in entries[-HISTORY_LIMIT:]
    ]


def build_task_instruction(
    intent: str,
    topic: str,
    message: Any = None,
    objective: Any = None,
    completed_modules: Any = None,
) -> str:
    safe_message = sanitize_text(message, MESSAGE_MAX_LENGTH, multiline=True)

    if intent not in SUPPORTED_INTENTS:
        raise AiAssistantError(400, "Le type de demande IA est invalide.")

    if intent == GUIDE_3_STEPS:
        if not safe_message:
            raise AiAssistantError(400, "Le message est requis pour le guide en 3 etapes.")
        return (
            "Mission: explique ce sujet en exactement 3 etapes utiles.\n"
            f"Sujet: {safe_message}\n"
            f"Contexte du site: {topic}\n"
            "Style: phrases courtes, une mise en garde finale si necessaire."
        )

    if intent == REWRITE_EMAIL:
        if not safe_message:
            raise AiAssistantError(400, "Le message est requis pour la reecriture.")
        return (
            "Mission: reformule le texte en message ou email clair, poli et directement exploitable.\n"
            "Texte de base:\n"
            f"{safe_message}\n"
            f"Contexte du site: {topic}\n"
            "Format attendu:\n"
            "1) Objet suggere si pertinent\n"
            "2) Version finale\n"
            "3) Mini conseil d'envoi"
        )

    if intent == NEXT_COURSE:
        safe_objective = sanitize_text(objective, OBJECTIVE_MAX_LENGTH)
        modules = []
        if isinstance(completed_modules, list):
            modules = [m for m in (sanitize_text(item, MODULE_MAX_LENGTH) for item in completed_modules) if m]
        modules_text = ", ".join(modules[:MODULES_LIMIT]) or "Aucun module fourni"
        return (
            "Mission: proposer la prochaine formation ou action la plus utile pour cet utilisateur.\n"
            f"Modules deja vus: {modules_text}\n"
            f"Objectif declare: {safe_objective or 'ameliorer sa productivite informatique'}\n"
            f"Contexte du site: {topic}\n"
            "Format attendu:\n"
            "1) Prochaine priorite\n"
            "2) Pourquoi ce choix\n"
            "3) Mini plan d'action"
        )

    if not safe_message:
        raise AiAssistantError(400, "Le message est requis.")
    return f"Question utilisateur: {safe_message}\nContexte du site: {topic}"


def build_messages(intent: str, task_instruction: str, history: Any = None) -> list[dict]:
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    if intent == TUTOR:
        messages.extend(sanitize_history(history))
    messages.append({"role": "user", "content": task_instruction})
    return messages


class AiAssistant:
    """Thin async wrapper over the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "gpt-4o-mini",
        timeout: float = 30,
        client: Optional[Any] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client
        # Injected clients belong to the caller; only close the one built here.
        self._owns_client = False

    @property
    def available(self) -> bool:
        return bool(self.api_key) or self._client is not None

    def _get_client(self):
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.close()
            self._client = None
            self._owns_client = False

    def capabilities(self) -> dict:
        return {
            "available": self.available,
            "provider": PROVIDER,
            "model": self.model,
            "intents": get_supported_intents(),
        }

    async def run(
        self,
        intent: str = TUTOR,
        message: Any = None,
        history: Any = None,
        context: Any = None,
        objective: Any = None,
        completed_modules: Any = None,
    ) -> AssistantReply:
        if not self.available:
            raise AiAssistantError(503, "OPENAI_API_KEY n'est pas configuree.")

        task_instruction = build_task_instruction(
            intent,
            infer_topic(context),
            message=message,
            objective=objective,
            completed_modules=completed_modules,
        )
        messages = build_messages(intent, task_instruction, history)

        try:
            completion = await self._get_client().chat.completions.create(
                model=self.model,
                temperature=0.2 if intent == REWRITE_EMAIL else 0.35,
                max_tokens=MAX_TOKENS,
                messages=messages,
            )
        except openai.APIStatusError as exc:
            logger.warning("AI provider returned %s for intent %s: %s", exc.status_code, intent, exc.message)
            raise AiAssistantError(exc.status_code or 500, exc.message or GENERIC_ERROR_MESSAGE) from exc
        except openai.APIError as exc:
            logger.warning("AI provider call failed for intent %s: %s", intent, exc)
            raise AiAssistantError(500, GENERIC_ERROR_MESSAGE) from exc

        answer = ""
        if completion.choices:
            answer = (completion.choices[0].message.content or "").strip()
        if not answer:
            raise AiAssistantError(502, "La reponse IA est vide.")

        usage = completion.usage.model_dump() if getattr(completion, "usage", None) is not None else None
        return AssistantReply(answer=answer, model=self.model, intent=intent, usage=usage)
