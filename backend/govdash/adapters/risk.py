"""Risk, risk category and assessment adapters."""
from typing import Any

from govdash.adapters.categories import DEFAULT_CATEGORY_CODE, category_label
from govdash.adapters.codec import encode
from govdash.adapters.fields import (
    as_mapping, date_only, first_set, first_truthy, number, optional_int,
    optional_text, related_name, text,
)
from govdash.adapters.translators import RISK_LEVEL, RISK_STATUS
from govdash.schemas.risk import (
    Assessment, AssessmentCreate, AssessmentUpdate, Risk, RiskCategory,
    RiskCreate, RiskUpdate,
)


def risk_reference(nested_risk: Any, risk_id: Any) -> str:
    """Display id of a linked risk: its own code, else the encoded key."""
    code = as_mapping(nested_risk).get("code")
    return text(code) if code else encode(risk_id, "RISK")


def adapt_category(data: Any) -> RiskCategory:
    data = as_mapping(data)
    code = text(data.get("code"))
    name = text(data.get("name"))
    return RiskCategory(
        id=optional_int(data.get("id")),
        name=name,
        code=code,
        label=category_label(code or name),
        description=optional_text(data.get("description")),
        color=optional_text(data.get("color")),
        icon=optional_text(data.get("icon")),
        sort_order=optional_int(data.get("sort_order")) or 0,
        risks_count=optional_int(data.get("risks_count")),
    )


def adapt_risk(risk: Any) -> Risk:
    risk = as_mapping(risk)
    category = as_mapping(risk.get("category"))

    likelihood = number(first_set(risk.get("residual_likelihood"), risk.get("inherent_likelihood"), default=1), 1)
    impact = number(first_set(risk.get("residual_impact"), risk.get("inherent_impact"), default=1), 1)
    score = number(
        first_set(risk.get("residual_score"), risk.get("inherent_score"), default=likelihood * impact),
        likelihood * impact,
    )

    category_code = first_truthy(
        category.get("code"),
        category.get("name"),
        risk.get("category_code"),
        risk.get("category_name"),
        default=DEFAULT_CATEGORY_CODE,
    )
    code = first_truthy(risk.get("code"), risk.get("risk_code"))

    return Risk(
        id=text(code) if code else encode(risk.get("id"), "RISK"),
        title=text(risk.get("title")),
        description=text(risk.get("description")),
        category=category_label(category_code),
        owner=first_truthy(related_name(risk.get("owner")), optional_text(risk.get("owner_name")), default="-"),
        status=RISK_STATUS.to_display(risk.get("status")),
        likelihood=likelihood,
        impact=impact,
        score=score,
        level=RISK_LEVEL.to_display(risk.get("risk_level") or "low"),
        created_at=text(risk.get("created_at")),
        updated_at=text(risk.get("updated_at")),
        stages_history=[],
        backend_id=optional_int(risk.get("id")),
        category_id=optional_int(risk.get("category_id")),
        owner_id=optional_int(risk.get("owner_id")),
        backend_status=optional_text(risk.get("status")),
    )


def adapt_risk_create(data: RiskCreate, category_id: int) -> dict:
    payload: dict = {
        "title": data.title,
        "description": data.description,
        "category_id": category_id,
    }
    if data.owner_id is not None:
        payload["owner_id"] = data.owner_id
    if data.status:
        payload["status"] = RISK_STATUS.to_persistence(data.status)
    return payload


def adapt_risk_update(data: RiskUpdate, category_id: int | None = None) -> dict:
    """Build a minimal persistence patch from a partial risk.

    Inclusion rules per field:
      title, description  -- only when non-empty
      category_id         -- only when a non-zero id was resolved
      owner_id            -- whenever the caller set it, including null
                             (clears the owner)
      status              -- only when non-empty, via the status translator
    """
    patch: dict = {}
    if data.title:
        patch["title"] = data.title
    if data.description:
        patch["description"] = data.description
    if category_id:
        patch["category_id"] = category_id
    if "owner_id" in data.model_fields_set:
        patch["owner_id"] = data.owner_id
    if data.status:
        patch["status"] = RISK_STATUS.to_persistence(data.status)
    return patch


def adapt_risk_status(status: str) -> dict:
    return {"status": RISK_STATUS.to_persistence(status)}


def adapt_assessment(assessment: Any) -> Assessment:
    assessment = as_mapping(assessment)
    return Assessment(
        id=encode(assessment.get("id"), "ASS"),
        risk_id=risk_reference(assessment.get("risk"), assessment.get("risk_id")),
        likelihood=number(assessment.get("likelihood")),
        impact=number(assessment.get("impact")),
        score=number(assessment.get("score")),
        level=RISK_LEVEL.to_display(assessment.get("risk_level")),
        assessor=related_name(assessment.get("assessor")) or "-",
        date=date_only(assessment.get("created_at")),
        notes=first_truthy(optional_text(assessment.get("notes")), optional_text(assessment.get("rationale")), default=""),
    )


def adapt_assessment_create(data: AssessmentCreate, risk_id: int) -> dict:
    return {
        "risk_id": risk_id,
        "assessment_type": data.type or "inherent",
        "likelihood": data.likelihood,
        "impact": data.impact,
        "rationale": data.notes or "",
    }


def adapt_assessment_update(data: AssessmentUpdate) -> dict:
    # Zero and empty notes are legitimate edits here; only unset fields are skipped
    return data.model_dump(include={"likelihood", "impact", "notes"}, exclude_unset=True)
