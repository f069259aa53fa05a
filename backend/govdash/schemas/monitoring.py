from govdash.schemas.common import DisplayModel


class KRI(DisplayModel):
    id: str
    risk_id: str | None = None
    metric_name: str = ""
    value: int | float = 0
    target_value: int | float = 0
    status: str
    updated_at: str = ""


class KRIValueUpdate(DisplayModel):
    value: float
    notes: str | None = None


class Incident(DisplayModel):
    id: str
    risk_id: str = ""
    title: str = ""
    date: str = ""
    severity: str
    status: str


class AuditLog(DisplayModel):
    id: str
    timestamp: str = ""
    actor: str
    action: str = ""
    entity_type: str = ""
    entity_id: str = ""
    details: str = ""
