"""Baseline site content and the admin image overrides applied over it."""

import copy
from typing import Any, Mapping, Optional

SITE_CONTENT: dict[str, Any] = {
    "brand": {
        "name": "Prometheus",
        "greekSignature": "Ignis Sophia",
        "promise": "Le feu de la connaissance numerique, au service de vos projets.",
        "whatsappBaseUrl": "https://api.whatsapp.com/send",
        "whatsappNumberLink": "+33 6 00 00 00 00",
        "quoteMessage": "Bonjour Prometheus, je souhaite recevoir un devis.",
        "bookingMessage": "Bonjour Prometheus, je souhaite reserver un creneau.",
        "paymentMessage": "Bonjour Prometheus, je souhaite debloquer une formation.",
    },
    "hero": {
        "headline": "Apprendre l'informatique simplement, avec methode et confiance",
        "subheadline": (
            "Prometheus accompagne particuliers, etudiants et petites equipes sur Excel, Word, "
            "PowerPoint et les outils IA utiles au quotidien."
        ),
        "ctaPrimary": "Voir les offres",
        "ctaSecondary": "Reserver un appel",
        "imagePath": "/images/pexels-fauxels-3184291.jpg",
        "imageAlt": "Accompagnement numerique bienveillant",
        "metrics": [
            {"value": "7 jours", "label": "programme intensif par outil"},
            {"value": "8 outils IA", "label": "selectionnes pour un usage concret"},
            {"value": "15 min", "label": "exercices quotidiens adaptes"},
        ],
    },
    "audiences": [
        {
            "title": "Particuliers",
            "detail": "Vous souhaitez mieux utiliser ordinateur, email et documents.",
            "benefit": "Objectif: autonomie numerique dans la vie quotidienne.",
        },
        {
            "title": "Etudiants",
            "detail": "Vous preparez un memoire, un CV ou une presentation.",
            "benefit": "Objectif: des documents propres et un usage maitrise de l'IA.",
        },
        {
            "title": "Petites equipes",
            "detail": "Vous devez adopter de nouveaux logiciels rapidement.",
            "benefit": "Objectif: rester performant avec les outils bureautiques et IA.",
        },
    ],
    "trainingModules": [
        {
            "id": "excel-base",
            "title": "Excel Base",
            "level": "Debutant",
            "duration": "1 semaine",
            "price": "59 EUR",
            "summary": "Tableaux clairs, formules essentielles, tri et filtres.",
            "imagePath": "/images/modules/excel-base.jpg",
        },
        {
            "id": "word-base",
            "title": "Word Base",
            "level": "Debutant",
            "duration": "1 semaine",
            "price": "49 EUR",
            "summary": "Mise en page lisible, modeles de lettres, export PDF.",
            "imagePath": "/images/modules/word-base.jpg",
        },
        {
            "id": "powerpoint-base",
            "title": "PowerPoint Base",
            "level": "Debutant",
            "duration": "1 semaine",
            "price": "49 EUR",
            "summary": "Structurer une presentation et presenter avec confiance.",
            "imagePath": "/images/modules/powerpoint-base.jpg",
        },
        {
            "id": "ia-pratique",
            "title": "IA pratique",
            "level": "Tous niveaux",
            "duration": "1 semaine",
            "price": "69 EUR",
            "summary": "Prompting simple, verification des reponses, cas concrets.",
            "imagePath": "/images/modules/ia-pratique.jpg",
        },
    ],
    "pricing": [
        {
            "id": "hestia",
            "name": "Hestia Decouverte",
            "price": "0 EUR",
            "period": "/toujours",
            "description": "Ideal pour commencer sans risque.",
            "highlight": False,
            "features": [
                "Evaluation numerique de depart (20 min)",
                "2 modules video: Excel et securite web",
                "Fiches pratiques telechargeables",
            ],
            "cta": "Commencer gratuitement",
        },
        {
            "id": "athena",
            "name": "Athena Semaine Active",
            "price": "89 EUR",
            "period": "/semaine",
            "description": "Le coeur de l'offre, progression rapide et accompagnee.",
            "highlight": True,
            "features": [
                "Programme 7 jours sur Excel, Word, PowerPoint et IA",
                "1 classe live quotidienne (60 min)",
                "Support WhatsApp ou email",
                "Bilan final + plan d'autonomie 30 jours",
            ],
            "cta": "Reserver ma semaine",
        },
        {
            "id": "olympus",
            "name": "Olympus Continuum",
            "price": "249 EUR",
            "period": "/mois",
            "description": "Pour aller plus loin avec un coach dedie.",
            "highlight": False,
            "features": [
                "2 coachings individuels par semaine",
                "Parcours IA avance: ChatGPT, Claude, Gemini, Perplexity",
                "Bibliotheque d'exercices metier",
            ],
            "cta": "Passer en premium",
        },
    ],
    "reservation": {
        "requestTypes": [
            {"value": "quote", "label": "Demande de devis"},
            {"value": "slot", "label": "Reservation d'un creneau"},
            {"value": "training-unlock", "label": "Deblocage d'une formation"},
        ],
        "services": [
            {"value": "office", "label": "Bureautique (Excel, Word, PowerPoint)"},
            {"value": "documents", "label": "Documents et rapports"},
            {"value": "cv", "label": "CV et candidature"},
            {"value": "ai-tools", "label": "Outils IA et productivite"},
            {"value": "coaching", "label": "Coaching individuel"},
        ],
        "slots": [
            {"value": "asap", "label": "Des que possible"},
            {"value": "morning", "label": "Matin"},
            {"value": "afternoon", "label": "Apres-midi"},
            {"value": "evening", "label": "Soir"},
            {"value": "weekend", "label": "Week-end"},
        ],
    },
    "faq": [
        {
            "question": "Le programme est-il adapte aux debutants complets ?",
            "answer": "Oui. Nous partons des bases avec un rythme progressif et un accompagnement humain.",
        },
        {
            "question": "Combien de temps faut-il par jour ?",
            "answer": "En general 45 a 60 minutes de session, puis 10 a 15 minutes de pratique quotidienne.",
        },
        {
            "question": "Puis-je choisir seulement Excel ou Word ?",
            "answer": "Oui. Les formations de base peuvent etre suivies separement selon vos besoins.",
        },
    ],
}


def _override_value(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def build_site_content(overrides: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    content = copy.deepcopy(SITE_CONTENT)
    if not isinstance(overrides, Mapping):
        return content

    hero_image = _override_value(overrides.get("heroImagePath"))
    if hero_image:
        content["hero"]["imagePath"] = hero_image

    module_images = overrides.get("moduleImages")
    if isinstance(module_images, Mapping):
        for module in content["trainingModules"]:
            image = _override_value(module_images.get(module["id"]))
            if image:
                module["imagePath"] = image

    return content


async def read_current_content(overrides_store) -> dict[str, Any]:
    await overrides_store.load_if_needed()
    return build_site_content(overrides_store.get())
