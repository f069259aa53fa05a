"""Risk category lookup cache.

Resolves a display category name (``"Security"``) to the persistence
category id. The category table is fetched lazily, kept until invalidated
(or until the optional TTL lapses), and fetched at most once per miss even
when several coroutines resolve concurrently.
"""
import asyncio
import time
from collections.abc import Awaitable, Callable

import structlog

from govdash.adapters.categories import category_label
from govdash.config import load_yaml_config

logger = structlog.get_logger()

CategoryFetcher = Callable[[], Awaitable[list[dict]]]

DEFAULT_CATEGORY_ID = 1

FALLBACK_CATEGORY_IDS: dict[str, int] = {
    "Operational": 1,
    "Financial": 2,
    "Strategic": 3,
    "Compliance": 4,
    "Technology": 5,
    "Reputational": 6,
    "Environmental": 7,
    "Security": 8,
}


def load_fallback_ids() -> dict[str, int]:
    """Fallback name -> id table, overridable via ``config/category_ids.yaml``."""
    raw = load_yaml_config("category_ids.yaml")
    if raw and isinstance(raw.get("categories"), dict):
        logger.info("Category fallback ids loaded from config")
        return {str(k): int(v) for k, v in raw["categories"].items()}
    return dict(FALLBACK_CATEGORY_IDS)


def matches(category: dict, name: str) -> bool:
    code = category.get("code")
    raw_name = category.get("name")
    if category_label(code or raw_name or "") == name:
        return True
    if raw_name == name:
        return True
    return isinstance(code, str) and code.lower() == name.lower()


class CategoryCache:
    def __init__(
        self,
        fetcher: CategoryFetcher,
        fallback_ids: dict[str, int] | None = None,
        ttl: float = 0,
    ) -> None:
        self._fetcher = fetcher
        self._fallback_ids = fallback_ids if fallback_ids is not None else dict(FALLBACK_CATEGORY_IDS)
        self._ttl = ttl
        self._categories: list[dict] | None = None
        self._fetched_at = 0.0
        # Bumped by invalidate(); a fetch that straddles a bump is not stored
        self._generation = 0
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        if self._categories is None:
            return False
        if self._ttl and time.monotonic() - self._fetched_at > self._ttl:
            return False
        return True

    async def get_categories(self, fetcher: CategoryFetcher | None = None) -> list[dict]:
        """Cached category table, fetching it on a miss.

        ``fetcher`` overrides the default one for this call, e.g. to fetch
        with the requesting user's credentials.
        """
        if self.is_loaded:
            return self._categories
        async with self._lock:
            # Another coroutine may have filled the slot while we waited
            if self.is_loaded:
                return self._categories
            generation = self._generation
            data = await (fetcher or self._fetcher)()
            categories = [c for c in data or [] if isinstance(c, dict)]
            if generation != self._generation:
                logger.info("category_fetch_discarded", count=len(categories))
                return categories
            self._categories = categories
            self._fetched_at = time.monotonic()
            logger.info("category_cache_filled", count=len(categories))
            return categories

    def invalidate(self) -> None:
        self._generation += 1
        self._categories = None
        self._fetched_at = 0.0
        logger.info("category_cache_invalidated")

    async def resolve(self, name: str, fetcher: CategoryFetcher | None = None) -> int:
        """Persistence id for a display category name. Never raises.

        Tries the fetched table first, then the fallback name table, then
        ``DEFAULT_CATEGORY_ID``.
        """
        name = name or ""
        try:
            categories = await self.get_categories(fetcher)
        except Exception as e:
            logger.warning("category_fetch_failed", category=name, error=str(e))
            categories = []

        for category in categories:
            if matches(category, name) and category.get("id"):
                return category["id"]
        return self._fallback_ids.get(name) or DEFAULT_CATEGORY_ID
