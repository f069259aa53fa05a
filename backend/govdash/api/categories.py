from fastapi import APIRouter, Depends, Response

from govdash.schemas.risk import RiskCategory, RiskCategoryCreate, RiskCategoryUpdate
from govdash.services.category_service import CategoryService, get_category_service

router = APIRouter()


@router.get("", response_model=list[RiskCategory])
async def list_categories(categories: CategoryService = Depends(get_category_service)):
    return await categories.list_categories()


@router.get("/resolve")
async def resolve_category(name: str, categories: CategoryService = Depends(get_category_service)):
    """Persistence id for a display category name (falls back to 1)."""
    return {"name": name, "id": await categories.resolve(name)}


@router.post("", response_model=RiskCategory, status_code=201)
async def create_category(body: RiskCategoryCreate, categories: CategoryService = Depends(get_category_service)):
    return await categories.create(body)


@router.put("/{category_id}", response_model=RiskCategory)
async def update_category(
    category_id: int,
    body: RiskCategoryUpdate,
    categories: CategoryService = Depends(get_category_service),
):
    return await categories.update(category_id, body)


@router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: int, categories: CategoryService = Depends(get_category_service)):
    await categories.delete(category_id)
    return Response(status_code=204)
