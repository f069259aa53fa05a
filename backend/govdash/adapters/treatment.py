"""Treatment plan and treatment action adapters."""
from typing import Any

from govdash.adapters.codec import encode
from govdash.adapters.fields import (
    as_mapping, number, optional_int, optional_text, related_name, text,
    without_nulls,
)
from govdash.adapters.risk import risk_reference
from govdash.adapters.translators import ACTION_COMPLETION, TREATMENT_STRATEGY
from govdash.schemas.treatment import (
    ActionCreate, ActionUpdate, Treatment, TreatmentAction, TreatmentCreate,
    TreatmentUpdate,
)

DONE = "Done"


def adapt_action(action: Any) -> TreatmentAction:
    action = as_mapping(action)
    return TreatmentAction(
        id=encode(action.get("id"), "ACT"),
        title=text(action.get("title")),
        owner=related_name(action.get("assignee")) or "-",
        due_date=text(action.get("due_date")),
        status=ACTION_COMPLETION.to_display(action.get("is_completed")),
        evidence_link=optional_text(action.get("evidence_url")),
        assignee_id=optional_int(action.get("assignee_id")),
    )


def adapt_treatment(plan: Any) -> Treatment:
    plan = as_mapping(plan)
    actions = plan.get("actions")
    return Treatment(
        id=encode(plan.get("id"), "TPL"),
        risk_id=risk_reference(plan.get("risk"), plan.get("risk_id")),
        approach=TREATMENT_STRATEGY.to_display(plan.get("strategy")),
        actions=[adapt_action(a) for a in actions] if isinstance(actions, list) else [],
        created_at=text(plan.get("created_at")),
        updated_at=text(plan.get("updated_at")),
        backend_id=optional_int(plan.get("id")),
        backend_risk_id=optional_int(plan.get("risk_id")),
        title=text(plan.get("title")),
        backend_status=optional_text(plan.get("status")),
        progress=number(plan.get("progress")),
    )


def adapt_treatment_create(data: TreatmentCreate, risk_id: int | None = None) -> dict:
    """Persistence create-payload for a plan and its initial actions.

    Each action's ``is_completed`` is a direct comparison against "Done",
    so "Not Started" and "In Progress" both persist as not completed.
    """
    payload: dict = {
        "title": data.title or "",
        "risk_id": risk_id,
        "strategy": TREATMENT_STRATEGY.to_persistence(data.approach),
        "actions": [
            without_nulls({
                "title": a.title,
                "due_date": a.due_date,
                "assignee_id": a.assignee_id,
                "is_completed": a.status == DONE,
            })
            for a in data.actions or []
        ],
    }
    if data.description:
        payload["description"] = data.description
    if data.target_date:
        payload["target_date"] = data.target_date
    if data.estimated_budget is not None:
        payload["estimated_budget"] = data.estimated_budget
    return without_nulls(payload)


def adapt_treatment_update(data: TreatmentUpdate) -> dict:
    patch: dict = {}
    if data.approach:
        patch["strategy"] = TREATMENT_STRATEGY.to_persistence(data.approach)
    if data.title:
        patch["title"] = data.title
    if data.description:
        patch["description"] = data.description
    if data.target_date:
        patch["target_date"] = data.target_date
    return patch


def adapt_action_create(data: ActionCreate, assignee_id: int | None = None) -> dict:
    payload: dict = {
        "title": data.title,
        "description": data.description,
        "priority": data.priority or "medium",
        "due_date": data.due_date,
        "assignee_id": assignee_id if assignee_id is not None else data.assignee_id,
        "notes": data.notes,
    }
    # "Done" goes through the completion endpoint instead, see completion_payload()
    if data.status and data.status != DONE:
        payload["is_completed"] = ACTION_COMPLETION.to_persistence(data.status)
    return without_nulls(payload)


def adapt_action_update(data: ActionUpdate) -> dict:
    """Partial action patch.

    title, description and due_date are sent only when non-empty;
    assignee_id and notes whenever the caller set them; a non-"Done"
    status maps through the completion translator.
    """
    patch: dict = {}
    if data.title:
        patch["title"] = data.title
    if data.description:
        patch["description"] = data.description
    if data.due_date:
        patch["due_date"] = data.due_date
    if "assignee_id" in data.model_fields_set:
        patch["assignee_id"] = data.assignee_id
    if "notes" in data.model_fields_set:
        patch["notes"] = data.notes
    if data.status and data.status != DONE:
        patch["is_completed"] = ACTION_COMPLETION.to_persistence(data.status)
    return patch


def completion_payload(data: ActionCreate | ActionUpdate) -> dict | None:
    """Body for the action completion endpoint, or None if not completing."""
    if data.status != DONE:
        return None
    return without_nulls({"notes": data.notes, "evidence_url": data.evidence_link})
