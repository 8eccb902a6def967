"""Admin image overrides for the site content, persisted as one JSON object."""

from typing import Any, Mapping

from backend.app.db.json_store import JsonFileStore, WriteResult

PATH_MAX_LENGTH = 500
MODULE_ID_MAX_LENGTH = 120
ALLOWED_PREFIXES = ("/", "http://", "https://")


def empty_overrides() -> dict:
    return {"heroImagePath": "", "moduleImages": {}}


def sanitize_image_path(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    text = value.strip()
    if not text or len(text) > PATH_MAX_LENGTH:
        return ""
    return text if text.startswith(ALLOWED_PREFIXES) else ""


def sanitize_content_overrides(raw: Any) -> dict:
    """Keep only valid image paths; anything else in ``raw`` is dropped."""
    if not isinstance(raw, Mapping):
        return empty_overrides()

    module_images = {}
    raw_modules = raw.get("moduleImages")
    if isinstance(raw_modules, Mapping):
        for module_id, image_path in raw_modules.items():
            safe_id = str(module_id).strip()[:MODULE_ID_MAX_LENGTH]
            safe_path = sanitize_image_path(image_path)
            if safe_id and safe_path:
                module_images[safe_id] = safe_path

    return {"heroImagePath": sanitize_image_path(raw.get("heroImagePath")), "moduleImages": module_images}


class ContentOverridesStore(JsonFileStore):
    label = "Content overrides store"

    def __init__(self, persist_path=None):
        super().__init__(persist_path)
        self._overrides = empty_overrides()

    def _apply_loaded(self, data: Any) -> None:
        if data is not None:
            self._overrides = sanitize_content_overrides(data)

    def _serializable_state(self) -> dict:
        return self._overrides

    def get(self) -> dict:
        return {
            "heroImagePath": self._overrides["heroImagePath"],
            "moduleImages": dict(self._overrides["moduleImages"]),
        }

    async def replace(self, next_overrides: Any) -> WriteResult[dict]:
        self._ensure_open()
        await self.load_if_needed()
        # Total replacement: module keys missing from the input lose their override.
        self._overrides = sanitize_content_overrides(next_overrides)
        stored = self.get()
        persisted, error = await self._persist()
        return WriteResult(value=stored, persisted=persisted, error=error)
