from fastapi import Depends, Request

from govdash.adapters.risk import adapt_category
from govdash.client import BackendClient, get_backend
from govdash.schemas.risk import RiskCategory, RiskCategoryCreate, RiskCategoryUpdate
from govdash.services.category_cache import CategoryCache

CATEGORIES_PATH = "/risks/categories"


class CategoryService:
    """Risk category CRUD; every mutation invalidates the lookup cache."""

    def __init__(self, backend: BackendClient, cache: CategoryCache):
        self.backend = backend
        self.cache = cache

    async def fetch(self) -> list[dict]:
        return await self.backend.get(CATEGORIES_PATH) or []

    async def list_categories(self) -> list[RiskCategory]:
        categories = await self.cache.get_categories(self.fetch)
        return [adapt_category(c) for c in categories]

    async def resolve(self, name: str) -> int:
        return await self.cache.resolve(name, self.fetch)

    async def create(self, data: RiskCategoryCreate) -> RiskCategory:
        try:
            created = await self.backend.post(CATEGORIES_PATH, data.model_dump(exclude_none=True))
        finally:
            self.cache.invalidate()
        return adapt_category(created)

    async def update(self, category_id: int, data: RiskCategoryUpdate) -> RiskCategory:
        try:
            updated = await self.backend.put(f"{CATEGORIES_PATH}/{category_id}", data.model_dump(exclude_unset=True))
        finally:
            self.cache.invalidate()
        return adapt_category(updated)

    async def delete(self, category_id: int) -> None:
        try:
            await self.backend.delete(f"{CATEGORIES_PATH}/{category_id}")
        finally:
            self.cache.invalidate()


def get_category_service(request: Request, backend: BackendClient = Depends(get_backend)) -> CategoryService:
    return CategoryService(backend, request.app.state.category_cache)
