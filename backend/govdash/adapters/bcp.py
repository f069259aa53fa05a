"""Business continuity adapters: the BCP and DR plans, business services,
DR sites and BCP/DR tests."""
from typing import Any

from govdash.adapters.codec import decode, encode
from govdash.adapters.fields import (
    as_mapping, date_only, first_truthy, flag, optional_int, optional_number,
    optional_text, related_name, string_list, text, today, without_nulls,
)
from govdash.adapters.translators import BCP_TEST_STATUS, SERVICE_CRITICALITY
from govdash.schemas.bcp import (
    BCPPlan, BCPPlanUpdate, BCPService, BCPServiceCreate, BCPServiceUpdate,
    BCPTest, BCPTestCreate, BCPTestUpdate, DRPlan, DRPlanUpdate, DRSite,
    DRSiteWrite,
)


def adapt_business_service(data: Any) -> BCPService:
    data = as_mapping(data)
    return BCPService(
        id=encode(data.get("id"), "SVC"),
        name=text(data.get("name")),
        criticality=SERVICE_CRITICALITY.to_display(data.get("criticality")),
        rto=text(data.get("rto")) or "N/A",
        rpo=text(data.get("rpo")) or "N/A",
        dependencies=string_list(data.get("dependencies")),
        owner=first_truthy(related_name(data.get("owner")), optional_text(data.get("department")), default="Unassigned"),
    )


def adapt_business_service_create(data: BCPServiceCreate) -> dict:
    return without_nulls({
        "name": data.name,
        "criticality": SERVICE_CRITICALITY.to_persistence(data.criticality),
        "rto": data.rto,
        "rpo": data.rpo,
        "dependencies": data.dependencies,
        "department": data.owner,
    })


def adapt_business_service_update(data: BCPServiceUpdate) -> dict:
    patch: dict = {}
    if data.name:
        patch["name"] = data.name
    if data.criticality:
        patch["criticality"] = SERVICE_CRITICALITY.to_persistence(data.criticality)
    if data.rto:
        patch["rto"] = data.rto
    if data.rpo:
        patch["rpo"] = data.rpo
    if data.dependencies is not None:
        patch["dependencies"] = data.dependencies
    if data.owner:
        patch["department"] = data.owner
    return patch


def adapt_dr_site(data: Any) -> DRSite:
    data = as_mapping(data)
    return DRSite(
        id=encode(data.get("id"), "DR"),
        name=text(data.get("name")),
        code=optional_text(data.get("code")),
        description=optional_text(data.get("description")),
        site_type=optional_text(data.get("site_type")),
        location=optional_text(data.get("location")),
        capacity=optional_number(data.get("capacity")),
        rto=optional_text(data.get("rto")),
        rpo=optional_text(data.get("rpo")),
        is_primary=flag(data.get("is_primary")),
        is_active=flag(data.get("is_active")),
        notes=optional_text(data.get("notes")),
        last_tested_at=optional_text(data.get("last_tested_at")),
    )


def adapt_dr_site_write(data: DRSiteWrite) -> dict:
    # Site fields share names with the persistence schema
    return data.model_dump(exclude_unset=True)


def _decode_ids(values: list[str]) -> list[int]:
    return [n for n in (decode(v) for v in values) if n > 0]


def adapt_bcp_test(data: Any) -> BCPTest:
    data = as_mapping(data)
    service_ids = data.get("service_ids")
    dr_site_id = data.get("dr_site_id")
    return BCPTest(
        id=encode(data.get("id"), "TEST"),
        name=text(data.get("name")),
        type="DR" if data.get("test_type") == "dr" else "BCP",
        date=date_only(data.get("scheduled_date")) or today(),
        status=BCP_TEST_STATUS.to_display(data.get("status")),
        duration_minutes=optional_number(data.get("duration_minutes")),
        notes=optional_text(data.get("notes")),
        service_ids=[encode(i, "SVC") for i in service_ids] if isinstance(service_ids, list) else None,
        dr_target_id=encode(dr_site_id, "DR") if dr_site_id else None,
    )


def adapt_bcp_test_create(data: BCPTestCreate) -> dict:
    service_ids = _decode_ids(data.service_ids or [])
    dr_site_id = decode(data.dr_target_id) if data.dr_target_id else 0
    payload: dict = {
        "name": data.name,
        "test_type": data.type.lower(),
        "scheduled_date": data.date,
        "status": BCP_TEST_STATUS.to_persistence(data.status),
        "duration_minutes": data.duration_minutes,
        "notes": data.notes,
    }
    if service_ids:
        payload["service_ids"] = service_ids
    # Only DR exercises target a recovery site
    if data.type == "DR" and dr_site_id:
        payload["dr_site_id"] = dr_site_id
    return without_nulls(payload)


def adapt_bcp_test_update(data: BCPTestUpdate) -> dict:
    """Partial test patch.

    A dr_target_id explicitly set to empty or null clears the site link.
    """
    patch: dict = {}
    if data.name:
        patch["name"] = data.name
    if data.type:
        patch["test_type"] = data.type.lower()
    if data.date:
        patch["scheduled_date"] = data.date
    if data.status:
        patch["status"] = BCP_TEST_STATUS.to_persistence(data.status)
    if data.duration_minutes:
        patch["duration_minutes"] = data.duration_minutes
    if data.notes:
        patch["notes"] = data.notes
    if data.service_ids is not None:
        patch["service_ids"] = _decode_ids(data.service_ids)
    if "dr_target_id" in data.model_fields_set:
        site_id = decode(data.dr_target_id) if data.dr_target_id else 0
        patch["dr_site_id"] = site_id or None
    return patch


def _list(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


def adapt_bcp_plan(data: Any) -> BCPPlan:
    data = as_mapping(data)
    return BCPPlan(
        last_updated=date_only(data.get("updated_at")) or today(),
        status=text(data.get("status")) or "Draft",
        sections=_list(data.get("sections")),
        id=optional_int(data.get("id")),
        title=text(data.get("title")) or "Business continuity plan",
        version=text(data.get("version")) or "1.0",
        description=text(data.get("description")),
        effective_date=optional_text(data.get("effective_date") or None),
        review_date=optional_text(data.get("review_date") or None),
        last_reviewed_at=optional_text(data.get("last_reviewed_at") or None),
        owner_id=optional_int(data.get("owner_id")) or None,
        owner_name=text(data.get("owner_name")),
        objectives=text(data.get("objectives")),
        scope=text(data.get("scope")),
        assumptions=text(data.get("assumptions")),
        emergency_contacts=_list(data.get("emergency_contacts")),
        communication_plan=text(data.get("communication_plan")),
        activation_triggers=_list(data.get("activation_triggers")),
    )


# Free-text plan fields: sent whenever the caller set them, even to ""
_PLAN_TEXT_FIELDS = ("description", "objectives", "scope", "assumptions", "communication_plan")
# Sent only when truthy
_PLAN_SCALAR_FIELDS = ("title", "version", "owner_id", "effective_date", "review_date")
# Sent whenever given, an empty list included
_PLAN_LIST_FIELDS = ("sections", "emergency_contacts", "activation_triggers")


def adapt_bcp_plan_update(data: BCPPlanUpdate) -> dict:
    """Partial plan patch.

    The display status ("Under Review") is stored as a lower-case code with
    its first space replaced (``under_review``).
    """
    patch: dict = {}
    if data.status:
        patch["status"] = data.status.lower().replace(" ", "_", 1)
    for field in _PLAN_LIST_FIELDS:
        value = getattr(data, field)
        if value is not None:
            patch[field] = value
    for field in _PLAN_SCALAR_FIELDS:
        value = getattr(data, field)
        if value:
            patch[field] = value
    for field in _PLAN_TEXT_FIELDS:
        if field in data.model_fields_set:
            patch[field] = getattr(data, field)
    return patch


def adapt_dr_plan(data: Any) -> DRPlan:
    data = as_mapping(data)
    sites = data.get("sites")
    return DRPlan(
        last_updated=date_only(data.get("last_updated")) or today(),
        rto=text(data.get("rto")) or "4 hours",
        rpo=text(data.get("rpo")) or "1 hour",
        sites=[adapt_dr_site(s) for s in sites] if isinstance(sites, list) else [],
    )


def adapt_dr_plan_update(data: DRPlanUpdate) -> dict:
    patch: dict = {}
    if data.rto:
        patch["rto"] = data.rto
    if data.rpo:
        patch["rpo"] = data.rpo
    return patch
