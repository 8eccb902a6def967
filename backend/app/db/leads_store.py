"""Append-only store of contact form leads, persisted as one JSON array."""

import math
from typing import Any, Iterable

from backend.app.db.json_store import JsonFileStore, WriteResult


def _numeric_id(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def next_lead_id(leads: Iterable[Any]) -> int:
    max_id = 0
    for lead in leads:
        if not isinstance(lead, dict):
            continue
        lead_id = _numeric_id(lead.get("id"))
        if lead_id is not None and lead_id > max_id:
            max_id = int(lead_id)
    return max_id + 1


class LeadsStore(JsonFileStore):
    label = "Leads store"

    def __init__(self, persist_path=None):
        super().__init__(persist_path)
        self._leads: list[dict] = []
        self.next_id = 1

    def _apply_loaded(self, data: Any) -> None:
        if isinstance(data, list):
            self._leads = data
        self.next_id = next_lead_id(self._leads)

    def _serializable_state(self) -> list[dict]:
        return self._leads

    def list(self) -> list[dict]:
        return list(self._leads)

    async def add(self, lead: dict) -> WriteResult[dict]:
        self._ensure_open()
        await self.load_if_needed()

        # Id assignment and append happen with no await in between.
        stored = {**lead, "id": self.next_id}
        self.next_id += 1
        self._leads.append(stored)

        persisted, error = await self._persist()
        return WriteResult(value=dict(stored), persisted=persisted, error=error)
