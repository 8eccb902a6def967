"""WhatsApp hand-off links returned after a contact submission."""

import re
from typing import Any, Mapping
from urllib.parse import urlencode

from backend.app.services.validation import find_label

DEFAULT_WHATSAPP_BASE_URL = "https://api.whatsapp.com/send"


def build_whatsapp_url(content: Mapping[str, Any], message: str) -> str:
    brand = content.get("brand") or {}
    base_url = brand.get("whatsappBaseUrl") or DEFAULT_WHATSAPP_BASE_URL
    params = {}
    phone = re.sub(r"\D", "", str(brand.get("whatsappNumberLink") or ""))
    if phone:
        params["phone"] = phone
    if message and message.strip():
        params["text"] = message.strip()
    return f"{base_url}?{urlencode(params)}" if params else base_url


def build_lead_whatsapp_message(content: Mapping[str, Any], lead: Mapping[str, Any]) -> str:
    brand = content.get("brand") or {}
    reservation = content.get("reservation") or {}
    request_type = lead.get("requestType") or "quote"

    if request_type == "training-unlock":
        intro = brand.get("paymentMessage", "")
    elif request_type == "slot":
        intro = brand.get("bookingMessage", "")
    else:
        intro = brand.get("quoteMessage", "")

    lines = [
        intro,
        f"Nom: {lead.get('name', '')}",
        f"Email: {lead.get('email', '')}",
        f"WhatsApp: {lead.get('phone') or 'non renseigne'}",
        f"Type: {find_label(reservation.get('requestTypes', []), request_type)}",
        f"Service: {find_label(reservation.get('services', []), lead.get('service') or 'office')}",
        f"Disponibilite: {find_label(reservation.get('slots', []), lead.get('preferredSlot') or 'asap')}",
        f"Besoin: {lead.get('goal', '')}",
    ]
    return "\n".join(lines)
