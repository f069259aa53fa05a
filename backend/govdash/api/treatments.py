import asyncio

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response

from govdash.adapters.codec import decode
from govdash.adapters.treatment import (
    adapt_action, adapt_action_create, adapt_action_update, adapt_treatment,
    adapt_treatment_create, adapt_treatment_update, completion_payload,
)
from govdash.client import BackendClient, BackendError, get_backend
from govdash.schemas.treatment import (
    ActionCreate, ActionUpdate, Treatment, TreatmentAction, TreatmentCreate,
    TreatmentUpdate,
)

router = APIRouter()
logger = structlog.get_logger()


async def _with_actions(backend: BackendClient, plan: dict) -> dict:
    """Attach the plan's actions; a plan whose actions fail to load gets none."""
    try:
        actions = await backend.get(f"/treatments/{plan.get('id')}/actions")
    except BackendError as e:
        logger.warning("treatment_actions_unavailable", plan_id=plan.get("id"), error=e.message)
        actions = []
    return {**plan, "actions": actions or []}


async def _plans_with_actions(backend: BackendClient, path: str) -> list[Treatment]:
    plans = await backend.get(path) or []
    plans = await asyncio.gather(*(_with_actions(backend, p) for p in plans if isinstance(p, dict)))
    return [adapt_treatment(p) for p in plans]


@router.get("", response_model=list[Treatment])
async def list_treatments(risk_id: str | None = None, backend: BackendClient = Depends(get_backend)):
    path = f"/treatments/risk/{decode(risk_id)}/plans" if risk_id else "/treatments"
    return await _plans_with_actions(backend, path)


@router.get("/{treatment_id}", response_model=Treatment)
async def get_treatment(treatment_id: str, backend: BackendClient = Depends(get_backend)):
    plan = await backend.get(f"/treatments/{decode(treatment_id)}")
    if not isinstance(plan, dict) or not plan:
        raise HTTPException(status_code=404, detail="Treatment plan not found")
    return adapt_treatment(await _with_actions(backend, plan))


@router.post("", response_model=Treatment, status_code=201)
async def create_treatment(body: TreatmentCreate, backend: BackendClient = Depends(get_backend)):
    if not body.title:
        body.title = f"Treatment plan - {body.approach}"
    risk_id = decode(body.risk_id) if body.risk_id else None
    created = await backend.post("/treatments", adapt_treatment_create(body, risk_id))
    return adapt_treatment(created)


@router.put("/{treatment_id}", response_model=Treatment)
async def update_treatment(treatment_id: str, body: TreatmentUpdate, backend: BackendClient = Depends(get_backend)):
    updated = await backend.put(f"/treatments/{decode(treatment_id)}", adapt_treatment_update(body))
    return adapt_treatment(updated)


@router.patch("/{treatment_id}/approve", response_model=Treatment)
async def approve_treatment(treatment_id: str, backend: BackendClient = Depends(get_backend)):
    return adapt_treatment(await backend.patch(f"/treatments/{decode(treatment_id)}/approve"))


@router.get("/{treatment_id}/progress")
async def treatment_progress(treatment_id: str, backend: BackendClient = Depends(get_backend)):
    data = await backend.get(f"/treatments/{decode(treatment_id)}/progress") or {}
    return {"progress": data.get("progress", 0)}


@router.delete("/{treatment_id}", status_code=204)
async def delete_treatment(treatment_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/treatments/{decode(treatment_id)}")
    return Response(status_code=204)


@router.post("/{treatment_id}/actions", response_model=TreatmentAction, status_code=201)
async def add_action(treatment_id: str, body: ActionCreate, backend: BackendClient = Depends(get_backend)):
    created = await backend.post(f"/treatments/{decode(treatment_id)}/actions", adapt_action_create(body))
    completion = completion_payload(body)
    if completion is not None:
        action_id = (created or {}).get("id")
        created = await backend.post(f"/treatments/actions/{action_id}/complete", completion)
    return adapt_action(created)


@router.put("/{treatment_id}/actions/{action_id}", response_model=TreatmentAction)
async def update_action(
    treatment_id: str,
    action_id: str,
    body: ActionUpdate,
    backend: BackendClient = Depends(get_backend),
):
    numeric_id = decode(action_id)
    patch = adapt_action_update(body)
    updated = None
    if patch:
        updated = await backend.put(f"/treatments/actions/{numeric_id}", patch)

    completion = completion_payload(body)
    if completion is not None:
        return adapt_action(await backend.post(f"/treatments/actions/{numeric_id}/complete", completion))
    if updated is not None:
        return adapt_action(updated)
    return adapt_action(await backend.get(f"/treatments/actions/{numeric_id}"))


@router.delete("/{treatment_id}/actions/{action_id}", status_code=204)
async def delete_action(treatment_id: str, action_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/treatments/actions/{decode(action_id)}")
    return Response(status_code=204)
