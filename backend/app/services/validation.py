"""Sanitization and validation of untrusted request input.

Every public entry point (contact form, admin content updates, AI endpoints)
goes through these helpers so malformed input never reaches the file stores
or the outbound LLM call.
"""

import re
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from backend.app.core.errors import ValidationError
from backend.app.core.time import isoformat_z, utc_now

# C0 controls except tab/newline/carriage return, DEL, and C1 controls.
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_SINGLE_LINE_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_PHONE_DISALLOWED = re.compile(r"[^0-9+()\- ]")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 180
PHONE_MAX_LENGTH = 80
CHOICE_MAX_LENGTH = 40
GOAL_MAX_LENGTH = 2000
NAME_MIN_LENGTH = 2
GOAL_MIN_LENGTH = 10

DEFAULT_REQUEST_TYPE = "quote"
DEFAULT_SERVICE = "office"
DEFAULT_SLOT = "asap"


def sanitize_text(value: Any, max_length: int = 500, multiline: bool = False) -> str:
    if value is None:
        return ""
    pattern = _CONTROL_CHARS if multiline else _SINGLE_LINE_CONTROL_CHARS
    text = pattern.sub("", str(value)).strip()
    return text[:max_length].strip()


def sanitize_phone(value: Any, max_length: int = PHONE_MAX_LENGTH) -> str:
    if value is None:
        return ""
    kept = _PHONE_DISALLOWED.sub("", str(value))
    return " ".join(kept.split())[:max_length].strip()


def is_valid_email(value: str) -> bool:
    return bool(value) and len(value) <= EMAIL_MAX_LENGTH and bool(_EMAIL_PATTERN.match(value))


def find_label(options: Iterable[Mapping[str, str]], value: str) -> str:
    for option in options:
        if option.get("value") == value:
            return option.get("label") or value
    return value


def validate_choice(options: Iterable[Mapping[str, str]], value: Any, field: str, default: str) -> str:
    candidate = sanitize_text(value, CHOICE_MAX_LENGTH)
    if not candidate:
        return default
    if any(option.get("value") == candidate for option in options):
        return candidate
    raise ValidationError(field, f"Valeur invalide pour le champ {field}.")


def validate_contact_payload(
    payload: Any, reservation: Mapping[str, list], now: Optional[datetime] = None
) -> dict:
    """Turn a raw contact form body into a sanitized lead draft.

    Raises ValidationError on the first failing field.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("body", "Le formulaire envoye est invalide.")

    email = sanitize_text(payload.get("email"), EMAIL_MAX_LENGTH).lower()
    if not is_valid_email(email):
        raise ValidationError("email", "Adresse email invalide.")

    name = sanitize_text(payload.get("name"), NAME_MAX_LENGTH)
    if len(name) < NAME_MIN_LENGTH:
        raise ValidationError("name", "Le nom doit contenir au moins 2 caracteres.")

    goal = sanitize_text(payload.get("goal"), GOAL_MAX_LENGTH, multiline=True)
    if len(goal) < GOAL_MIN_LENGTH:
        raise ValidationError("goal", "Decrivez votre besoin en au moins 10 caracteres.")

    phone = sanitize_phone(payload.get("phone") or payload.get("whatsapp"))

    request_type = validate_choice(
        reservation.get("requestTypes", []), payload.get("requestType"), "requestType", DEFAULT_REQUEST_TYPE
    )
    service = validate_choice(reservation.get("services", []), payload.get("service"), "service", DEFAULT_SERVICE)
    preferred_slot = validate_choice(
        reservation.get("slots", []), payload.get("preferredSlot"), "preferredSlot", DEFAULT_SLOT
    )

    return {
        "name": name,
        "email": email,
        "phone": phone,
        "requestType": request_type,
        "service": service,
        "preferredSlot": preferred_slot,
        "goal": goal,
        "createdAt": isoformat_z(now or utc_now()),
    }
