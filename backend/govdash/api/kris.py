from fastapi import APIRouter, Depends, HTTPException

from govdash.adapters.codec import decode
from govdash.adapters.monitoring import adapt_kri, adapt_kri_value
from govdash.adapters.translators import KRI_STATUS
from govdash.client import BackendClient, get_backend
from govdash.schemas.monitoring import KRI, KRIValueUpdate

router = APIRouter()


@router.get("", response_model=list[KRI])
async def list_kris(
    risk_id: str | None = None,
    status: str | None = None,
    backend: BackendClient = Depends(get_backend),
):
    if risk_id:
        records = await backend.get(f"/risks/{decode(risk_id)}/kris") or []
    else:
        params = {"status": KRI_STATUS.to_persistence(status) if status else None}
        records, _ = await backend.get_page("/kris", params)
    return [adapt_kri(k) for k in records]


@router.get("/{kri_id}", response_model=KRI)
async def get_kri(kri_id: str, backend: BackendClient = Depends(get_backend)):
    kri = await backend.get(f"/kris/{decode(kri_id)}")
    if not kri:
        raise HTTPException(status_code=404, detail="KRI not found")
    return adapt_kri(kri)


@router.post("/{kri_id}/values", response_model=KRI, status_code=201)
async def record_value(kri_id: str, body: KRIValueUpdate, backend: BackendClient = Depends(get_backend)):
    """Record a new measurement; the persistence service recomputes status."""
    return adapt_kri(await backend.post(f"/kris/{decode(kri_id)}/values", adapt_kri_value(body)))
