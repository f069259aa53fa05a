from fastapi import APIRouter, Depends, HTTPException

from govdash.adapters.codec import decode
from govdash.adapters.monitoring import adapt_incident, incident_filters
from govdash.client import BackendClient, get_backend
from govdash.schemas.monitoring import Incident

router = APIRouter()


@router.get("", response_model=list[Incident])
async def list_incidents(
    risk_id: str | None = None,
    severity: str | None = None,
    status: str | None = None,
    backend: BackendClient = Depends(get_backend),
):
    if risk_id:
        records = await backend.get(f"/risks/{decode(risk_id)}/incidents") or []
    else:
        records, _ = await backend.get_page("/incidents", incident_filters(severity, status))
    return [adapt_incident(i) for i in records]


@router.get("/{incident_id}", response_model=Incident)
async def get_incident(incident_id: str, backend: BackendClient = Depends(get_backend)):
    incident = await backend.get(f"/incidents/{decode(incident_id)}")
    if not incident:
        raise HTTPException(status_code=404, detail="Incident not found")
    return adapt_incident(incident)
