from pydantic import Field

from govdash.schemas.common import DisplayModel


class RiskCategory(DisplayModel):
    id: int | None = None
    name: str = ""
    code: str = ""
    label: str = ""
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    sort_order: int = 0
    risks_count: int | None = None


class RiskCategoryCreate(DisplayModel):
    name: str
    code: str
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    sort_order: int | None = None


class RiskCategoryUpdate(DisplayModel):
    name: str | None = None
    code: str | None = None
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    sort_order: int | None = None


class Risk(DisplayModel):
    id: str
    title: str = ""
    description: str = ""
    category: str
    owner: str
    status: str
    likelihood: int | float
    impact: int | float
    score: int | float
    level: str
    created_at: str = ""
    updated_at: str = ""
    stages_history: list[dict] = []
    backend_id: int | None = Field(default=None, alias="_backendId")
    category_id: int | None = Field(default=None, alias="_categoryId")
    owner_id: int | None = Field(default=None, alias="_ownerId")
    backend_status: str | None = Field(default=None, alias="_backendStatus")


class RiskCreate(DisplayModel):
    title: str
    description: str = ""
    category: str = "Operational"
    owner_id: int | None = None
    status: str | None = None


class RiskUpdate(DisplayModel):
    title: str | None = None
    description: str | None = None
    category: str | None = None
    owner_id: int | None = None
    status: str | None = None


class RiskStatusChange(DisplayModel):
    status: str


class Assessment(DisplayModel):
    id: str
    risk_id: str
    likelihood: int | float
    impact: int | float
    score: int | float
    level: str
    assessor: str
    date: str
    notes: str = ""


class AssessmentCreate(DisplayModel):
    risk_id: str
    likelihood: int
    impact: int
    notes: str | None = None
    type: str = "inherent"


class AssessmentUpdate(DisplayModel):
    likelihood: int | None = None
    impact: int | None = None
    notes: str | None = None
