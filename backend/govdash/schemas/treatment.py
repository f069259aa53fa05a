from pydantic import Field

from govdash.schemas.common import DisplayModel


class TreatmentAction(DisplayModel):
    id: str
    title: str = ""
    owner: str
    due_date: str = ""
    status: str
    evidence_link: str | None = None
    assignee_id: int | None = Field(default=None, alias="_assigneeId")


class Treatment(DisplayModel):
    id: str
    risk_id: str
    approach: str
    actions: list[TreatmentAction] = []
    created_at: str = ""
    updated_at: str = ""
    backend_id: int | None = Field(default=None, alias="_backendId")
    backend_risk_id: int | None = Field(default=None, alias="_backendRiskId")
    title: str = Field(default="", alias="_title")
    backend_status: str | None = Field(default=None, alias="_status")
    progress: int | float = Field(default=0, alias="_progress")


class ActionDraft(DisplayModel):
    """An action embedded in a new treatment plan."""

    title: str = ""
    due_date: str | None = None
    status: str = "Not Started"
    assignee_id: int | None = Field(default=None, alias="_assigneeId")


class TreatmentCreate(DisplayModel):
    risk_id: str | None = None
    approach: str = "Mitigate"
    title: str = Field(default="", alias="_title")
    description: str | None = None
    target_date: str | None = None
    estimated_budget: float | None = None
    actions: list[ActionDraft] = []


class TreatmentUpdate(DisplayModel):
    approach: str | None = None
    title: str | None = None
    description: str | None = None
    target_date: str | None = None


class ActionCreate(DisplayModel):
    title: str
    description: str | None = None
    due_date: str | None = None
    priority: str = "medium"
    assignee_id: int | None = None
    evidence_link: str | None = None
    notes: str | None = None
    status: str | None = None


class ActionUpdate(DisplayModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    assignee_id: int | None = None
    evidence_link: str | None = None
    notes: str | None = None
    status: str | None = None
