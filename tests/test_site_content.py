from urllib.parse import parse_qs, urlparse

from backend.app.services.site_content import SITE_CONTENT, build_site_content
from backend.app.services.whatsapp import build_lead_whatsapp_message, build_whatsapp_url


def test_build_without_overrides_returns_copy_of_baseline():
    content = build_site_content()
    assert content == SITE_CONTENT
    content["hero"]["imagePath"] = "/mutated.jpg"
    assert SITE_CONTENT["hero"]["imagePath"] != "/mutated.jpg"


def test_overrides_apply_to_hero_and_known_modules():
    content = build_site_content(
        {"heroImagePath": "/hero.jpg", "moduleImages": {"excel-base": "/excel.jpg", "ghost": "/ghost.jpg"}}
    )
    assert content["hero"]["imagePath"] == "/hero.jpg"
    images = {module["id"]: module["imagePath"] for module in content["trainingModules"]}
    assert images["excel-base"] == "/excel.jpg"
    assert images["word-base"] == "/images/modules/word-base.jpg"
    assert "ghost" not in images


def test_empty_hero_override_keeps_baseline():
    content = build_site_content({"heroImagePath": "", "moduleImages": {}})
    assert content["hero"]["imagePath"] == SITE_CONTENT["hero"]["imagePath"]


def test_whatsapp_message_uses_labels_and_intro():
    lead = {
        "name": "Ana",
        "email": "ana@example.com",
        "phone": "",
        "requestType": "slot",
        "service": "cv",
        "preferredSlot": "evening",
        "goal": "Refaire mon CV avant lundi",
    }
    message = build_lead_whatsapp_message(SITE_CONTENT, lead)
    lines = message.split("\n")
    assert lines[0] == SITE_CONTENT["brand"]["bookingMessage"]
    assert "WhatsApp: non renseigne" in lines
    assert "Service: CV et candidature" in lines
    assert "Disponibilite: Soir" in lines


def test_whatsapp_url_carries_phone_digits_and_text():
    url = build_whatsapp_url(SITE_CONTENT, "Bonjour\nPrometheus")
    parsed = urlparse(url)
    query = parse_qs(parsed.query)
    assert url.startswith("https://api.whatsapp.com/send?")
    assert query["phone"] == ["33600000000"]
    assert query["text"] == ["Bonjour\nPrometheus"]


def test_whatsapp_url_without_phone_or_text():
    assert build_whatsapp_url({"brand": {}}, "") == "https://api.whatsapp.com/send"
