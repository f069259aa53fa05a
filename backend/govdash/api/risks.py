from fastapi import APIRouter, Depends, HTTPException, Query, Response

from govdash.adapters.codec import decode
from govdash.adapters.risk import (
    adapt_risk, adapt_risk_create, adapt_risk_status, adapt_risk_update,
)
from govdash.adapters.translators import RISK_STATUS
from govdash.client import BackendClient, get_backend
from govdash.schemas.common import PaginatedResponse
from govdash.schemas.risk import Risk, RiskCreate, RiskStatusChange, RiskUpdate
from govdash.services.category_service import CategoryService, get_category_service
from govdash.services.pagination import paginate

router = APIRouter()


@router.get("", response_model=PaginatedResponse[Risk])
async def list_risks(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    status: str | None = None,
    category: str | None = None,
    search: str | None = None,
    backend: BackendClient = Depends(get_backend),
    categories: CategoryService = Depends(get_category_service),
):
    params: dict = {"search": search}
    if status:
        params["status"] = RISK_STATUS.to_persistence(status)
    if category:
        params["category_id"] = await categories.resolve(category)
    return await paginate(backend, "/risks", adapt_risk, page, page_size, params)


@router.get("/overdue-review", response_model=list[Risk])
async def overdue_review(backend: BackendClient = Depends(get_backend)):
    records, _ = await backend.get_page("/risks/overdue-review")
    return [adapt_risk(r) for r in records]


@router.get("/{risk_id}", response_model=Risk)
async def get_risk(risk_id: str, backend: BackendClient = Depends(get_backend)):
    risk = await backend.get(f"/risks/{decode(risk_id)}")
    if not risk:
        raise HTTPException(status_code=404, detail="Risk not found")
    return adapt_risk(risk)


@router.post("", response_model=Risk, status_code=201)
async def create_risk(
    body: RiskCreate,
    backend: BackendClient = Depends(get_backend),
    categories: CategoryService = Depends(get_category_service),
):
    category_id = await categories.resolve(body.category)
    created = await backend.post("/risks", adapt_risk_create(body, category_id))
    return adapt_risk(created)


@router.put("/{risk_id}", response_model=Risk)
async def update_risk(
    risk_id: str,
    body: RiskUpdate,
    backend: BackendClient = Depends(get_backend),
    categories: CategoryService = Depends(get_category_service),
):
    category_id = await categories.resolve(body.category) if body.category else None
    updated = await backend.put(f"/risks/{decode(risk_id)}", adapt_risk_update(body, category_id))
    return adapt_risk(updated)


@router.patch("/{risk_id}/status", response_model=Risk)
async def change_status(risk_id: str, body: RiskStatusChange, backend: BackendClient = Depends(get_backend)):
    updated = await backend.patch(f"/risks/{decode(risk_id)}/status", adapt_risk_status(body.status))
    return adapt_risk(updated)


@router.delete("/{risk_id}", status_code=204)
async def delete_risk(risk_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/risks/{decode(risk_id)}")
    return Response(status_code=204)
