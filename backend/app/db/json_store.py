"""Single-file JSON persistence shared by the leads and content override stores.

Writes are serialized through one asyncio.Lock per store: the JSON snapshot is
taken while the lock is held, so the last queued write always carries the
latest in-memory state. Blocking file work runs in a worker thread and lands
through a temp file + os.replace so readers never see a half-written file.
"""

import asyncio
import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class WriteResult(Generic[T]):
    """Outcome of a store mutation: the stored value plus whether it reached disk."""

    value: T
    persisted: bool
    error: Optional[str] = None


class JsonFileStore:
    label = "JSON store"

    def __init__(self, persist_path: Optional[str | Path] = None):
        self.persist_path: Optional[Path] = Path(persist_path).resolve() if persist_path else None
        self.load_count = 0
        self._loaded = False
        self._closed = False
        self._load_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    async def open(self):
        self._closed = False
        await self.load_if_needed()
        return self

    async def close(self) -> None:
        # Wait for the in-flight write before refusing new mutations.
        async with self._write_lock:
            self._closed = True

    async def load_if_needed(self) -> None:
        if self._loaded:
            return
        async with self._load_lock:
            if self._loaded:
                return
            data = None
            if self.persist_path is not None:
                self.load_count += 1
                try:
                    data = await asyncio.to_thread(self._read_file, self.persist_path)
                except FileNotFoundError:
                    data = None
                except (OSError, ValueError) as exc:
                    logger.warning("%s load failed for %s: %s", self.label, self.persist_path, exc)
                    data = None
            self._apply_loaded(data)
            self._loaded = True

    def _apply_loaded(self, data: Any) -> None:
        raise NotImplementedError

    def _serializable_state(self) -> Any:
        raise NotImplementedError

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"{self.label} is closed")

    async def _persist(self) -> tuple[bool, Optional[str]]:
        if self.persist_path is None:
            return True, None
        async with self._write_lock:
            try:
                text = json.dumps(self._serializable_state(), indent=2, ensure_ascii=False)
                await asyncio.to_thread(self._write_file, self.persist_path, text)
            except (OSError, TypeError, ValueError) as exc:
                logger.warning("%s persist failed for %s: %s", self.label, self.persist_path, exc)
                return False, str(exc)
        return True, None

    @staticmethod
    def _read_file(path: Path) -> Any:
        return json.loads(path.read_text(encoding="utf-8"))

    @staticmethod
    def _write_file(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
