"""KRI, incident and audit log adapters."""
from typing import Any

from govdash.adapters.codec import encode
from govdash.adapters.fields import (
    as_mapping, date_only, first_truthy, number, optional_text, related_name, text,
    without_nulls,
)
from govdash.adapters.translators import INCIDENT_SEVERITY, INCIDENT_STATUS, KRI_STATUS
from govdash.schemas.monitoring import KRI, AuditLog, Incident, KRIValueUpdate


def adapt_kri(data: Any) -> KRI:
    data = as_mapping(data)
    risk_id = data.get("risk_id")
    return KRI(
        id=encode(data.get("id"), "KRI"),
        risk_id=encode(risk_id, "RISK") if risk_id else None,
        metric_name=text(data.get("name")),
        value=number(data.get("current_value") or 0),
        target_value=number(data.get("target_value") or 0),
        status=KRI_STATUS.to_display(data.get("status")),
        updated_at=date_only(data.get("last_updated")) or date_only(data.get("updated_at")),
    )


def adapt_kri_value(data: KRIValueUpdate) -> dict:
    return without_nulls({"value": data.value, "notes": data.notes})


def adapt_incident(data: Any) -> Incident:
    data = as_mapping(data)
    risk_id = data.get("risk_id")
    return Incident(
        id=encode(data.get("id"), "INC"),
        # "" rather than None: no linked risk
        risk_id=encode(risk_id, "RISK") if risk_id else "",
        title=text(data.get("title")),
        date=date_only(data.get("occurred_at")),
        severity=INCIDENT_SEVERITY.to_display(data.get("severity")),
        status=INCIDENT_STATUS.to_display(data.get("status")),
    )


def incident_filters(severity: str | None = None, status: str | None = None) -> dict:
    """Translate display-side incident filters into persistence query params."""
    params: dict = {}
    if severity:
        params["severity"] = INCIDENT_SEVERITY.to_persistence(severity)
    if status:
        params["status"] = INCIDENT_STATUS.to_persistence(status)
    return params


def adapt_audit_log(log: Any) -> AuditLog:
    log = as_mapping(log)
    return AuditLog(
        id=encode(log.get("id"), "LOG"),
        timestamp=text(log.get("created_at")),
        actor=first_truthy(related_name(log.get("user")), optional_text(log.get("user_name")), default="System"),
        action=text(log.get("action")).upper(),
        entity_type=text(log.get("entity_type")),
        entity_id=text(log.get("entity_id") or ""),
        details=text(log.get("description")),
    )
