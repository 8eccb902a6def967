import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_FRONTEND_ORIGIN = "http://localhost:5173"
DEV_ORIGINS = ["http://127.0.0.1:5173", "http://localhost:5173"]


def _env_str(name: str, default: str = "") -> str:
    return str(os.getenv(name, default) or "").strip()


def _env_number(name: str, default: float) -> float:
    try:
        value = float(os.getenv(name, ""))
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_origins(raw: str) -> list[str]:
    origins = [value.strip() for value in raw.split(",") if value.strip()]
    for origin in DEV_ORIGINS:
        if origin not in origins:
            origins.append(origin)
    return origins


class Settings:
    def __init__(self):
        self.app_name = "Prometheus API"
        self.service_name = "prometheus-api"
        self.api_version = "1.0.0"
        self.environment = _env_str("ENVIRONMENT", "development")
        self.port = int(_env_number("PORT", 4000))
        self.log_level = _env_str("LOG_LEVEL", "INFO")

        self.admin_api_key = _env_str("ADMIN_API_KEY")
        self.admin_session_secret = _env_str("ADMIN_SESSION_SECRET") or self.admin_api_key
        self.admin_session_ttl_hours = _env_number("ADMIN_SESSION_TTL_HOURS", 12)

        self.leads_persist_path = _env_str("LEADS_PERSIST_PATH")
        self.content_overrides_path = _env_str("CONTENT_OVERRIDES_PATH")

        self.frontend_origins = _parse_origins(
            _env_str("FRONTEND_ORIGINS") or _env_str("FRONTEND_ORIGIN") or DEFAULT_FRONTEND_ORIGIN
        )

        self.openai_api_key = _env_str("OPENAI_API_KEY")
        self.openai_model = _env_str("OPENAI_MODEL") or "gpt-4o-mini"
        self.openai_timeout_seconds = _env_number("OPENAI_TIMEOUT_SECONDS", 30)

    @property
    def admin_enabled(self) -> bool:
        return bool(self.admin_api_key)


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
