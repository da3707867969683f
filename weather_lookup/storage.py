# ABOUTME: Key-value storage contract and backends used to persist favorites.
# ABOUTME: Provides an in-memory backend for tests and an atomically written JSON file backend.

import asyncio
import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from weather_lookup.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Minimal async get/set/remove contract over durable string storage.

    Backends raise StorageError when the underlying medium fails.
    """

    async def get_item(self, key: str) -> str | None: ...

    async def set_item(self, key: str, value: str) -> None: ...

    async def remove_item(self, key: str) -> None: ...


class InMemoryStorage:
    """Dict-backed storage. Contents live as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """Stores all keys in one JSON object on disk.

    Every write replaces the whole file through a temporary sibling and
    os.replace, so readers see either the old or the new contents.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path).expanduser()

    async def get_item(self, key: str) -> str | None:
        items = await asyncio.to_thread(self._read)
        return items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)

    async def remove_item(self, key: str) -> None:
        await asyncio.to_thread(self._update, key, None)

    def _read(self) -> dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as e:
            raise StorageError(f"{self.path} is not valid UTF-8") from e
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON") from e
        if not isinstance(items, dict):
            raise StorageError(f"{self.path} does not contain a JSON object")
        return items

    def _update(self, key: str, value: str | None) -> None:
        items = self._read()
        if value is None:
            if key not in items:
                return
            del items[key]
        else:
            items[key] = value
        self._write(items)

    def _write(self, items: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(items, f)
                os.replace(tmp_name, self.path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        logger.debug("Wrote %d key(s) to %s", len(items), self.path)
