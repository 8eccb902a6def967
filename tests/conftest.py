import pytest

from backend.app.core import settings as settings_module
from backend.app.main import app

ENV_VARS = (
    "ADMIN_API_KEY",
    "ADMIN_SESSION_SECRET",
    "ADMIN_SESSION_TTL_HOURS",
    "LEADS_PERSIST_PATH",
    "CONTENT_OVERRIDES_PATH",
    "FRONTEND_ORIGIN",
    "FRONTEND_ORIGINS",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_TIMEOUT_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture
def configure(monkeypatch, tmp_path):
    """Rebuild the settings singleton from a clean environment plus ``env``."""

    def _configure(**env):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        env.setdefault("LEADS_PERSIST_PATH", str(tmp_path / "leads.json"))
        env.setdefault("CONTENT_OVERRIDES_PATH", str(tmp_path / "content-overrides.json"))
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        current = settings_module.Settings()
        monkeypatch.setattr(settings_module, "_settings_instance", current)
        return current

    return _configure


@pytest.fixture(autouse=True)
def clear_dependency_overrides():
    yield
    app.dependency_overrides.clear()
