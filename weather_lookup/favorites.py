# ABOUTME: Persisted, ordered, duplicate-free list of favorite city names.
# ABOUTME: Single writer of the favorites record; storage is injected so tests can use an in-memory fake.

import logging

from pydantic import ValidationError

from weather_lookup.errors import StorageError
from weather_lookup.models import favorites_adapter
from weather_lookup.storage import KeyValueStorage

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


class FavoritesStore:
    """Read-modify-write access to the favorites record.

    Nothing is cached between calls: every operation starts from the durable
    record, and every mutation persists the full list in one write.
    """

    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key

    async def load(self) -> list[str]:
        """Return the persisted favorites, or an empty list if none were saved."""
        raw = await self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            return favorites_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error("Favorites record %r is corrupt", self.key)
            raise StorageError(f"Favorites record {self.key!r} is not a JSON list of strings") from e

    async def add(self, city: str) -> list[str]:
        """Append a city unless it is already present (exact match)."""
        favorites = await self.load()
        if city in favorites:
            return favorites
        updated = [*favorites, city]
        await self._save(updated)
        logger.debug("Added %r to favorites", city)
        return updated

    async def remove(self, city: str) -> list[str]:
        """Drop every entry equal to `city`. Succeeds when it is absent."""
        favorites = await self.load()
        updated = [fav for fav in favorites if fav != city]
        if updated == favorites:
            return favorites
        await self._save(updated)
        logger.debug("Removed %r from favorites", city)
        return updated

    async def clear(self) -> None:
        """Delete the favorites record entirely."""
        await self.storage.remove_item(self.key)
        logger.debug("Cleared favorites")

    async def _save(self, favorites: list[str]) -> None:
        await self.storage.set_item(self.key, favorites_adapter.dump_json(favorites).decode())
