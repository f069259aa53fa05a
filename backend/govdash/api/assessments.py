from fastapi import APIRouter, Depends, HTTPException, Response

from govdash.adapters.codec import decode
from govdash.adapters.risk import (
    adapt_assessment, adapt_assessment_create, adapt_assessment_update,
)
from govdash.client import BackendClient, get_backend
from govdash.schemas.risk import Assessment, AssessmentCreate, AssessmentUpdate

router = APIRouter()


@router.get("", response_model=list[Assessment])
async def list_assessments(risk_id: str | None = None, backend: BackendClient = Depends(get_backend)):
    path = f"/risks/{decode(risk_id)}/assessments" if risk_id else "/assessments"
    records, _ = await backend.get_page(path)
    return [adapt_assessment(a) for a in records]


@router.get("/matrix")
async def risk_matrix(backend: BackendClient = Depends(get_backend)):
    return await backend.get("/assessments/matrix")


@router.get("/{assessment_id}", response_model=Assessment)
async def get_assessment(assessment_id: str, backend: BackendClient = Depends(get_backend)):
    assessment = await backend.get(f"/assessments/{decode(assessment_id)}")
    if not assessment:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return adapt_assessment(assessment)


@router.post("", response_model=Assessment, status_code=201)
async def create_assessment(body: AssessmentCreate, backend: BackendClient = Depends(get_backend)):
    created = await backend.post("/assessments", adapt_assessment_create(body, decode(body.risk_id)))
    return adapt_assessment(created)


@router.put("/{assessment_id}", response_model=Assessment)
async def update_assessment(assessment_id: str, body: AssessmentUpdate, backend: BackendClient = Depends(get_backend)):
    updated = await backend.put(f"/assessments/{decode(assessment_id)}", adapt_assessment_update(body))
    return adapt_assessment(updated)


@router.patch("/{assessment_id}/approve", response_model=Assessment)
async def approve_assessment(assessment_id: str, backend: BackendClient = Depends(get_backend)):
    return adapt_assessment(await backend.patch(f"/assessments/{decode(assessment_id)}/approve"))


@router.patch("/{assessment_id}/reject", response_model=Assessment)
async def reject_assessment(assessment_id: str, reason: str, backend: BackendClient = Depends(get_backend)):
    rejected = await backend.patch(
        f"/assessments/{decode(assessment_id)}/reject", {"rejection_reason": reason},
    )
    return adapt_assessment(rejected)


@router.delete("/{assessment_id}", status_code=204)
async def delete_assessment(assessment_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/assessments/{decode(assessment_id)}")
    return Response(status_code=204)
