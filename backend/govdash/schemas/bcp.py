from typing import Any

from pydantic import Field, computed_field

from govdash.schemas.common import DisplayModel


class BCPService(DisplayModel):
    id: str
    name: str = ""
    criticality: str
    rto: str
    rpo: str
    dependencies: list[str] = []
    owner: str


class BCPServiceCreate(DisplayModel):
    name: str
    criticality: str = "Medium"
    rto: str | None = None
    rpo: str | None = None
    dependencies: list[str] = []
    owner: str | None = None


class BCPServiceUpdate(DisplayModel):
    name: str | None = None
    criticality: str | None = None
    rto: str | None = None
    rpo: str | None = None
    dependencies: list[str] | None = None
    owner: str | None = None


class DRSite(DisplayModel):
    id: str
    name: str = ""
    code: str | None = None
    description: str | None = None
    site_type: str | None = None
    location: str | None = None
    capacity: int | float | None = None
    rto: str | None = None
    rpo: str | None = None
    is_primary: bool = False
    is_active: bool = False
    notes: str | None = None
    last_tested_at: str | None = None

    # Persistence-keyed copies read by the DR site views
    @computed_field(alias="site_type")
    @property
    def raw_site_type(self) -> str | None:
        return self.site_type

    @computed_field(alias="is_primary")
    @property
    def raw_is_primary(self) -> bool:
        return self.is_primary

    @computed_field(alias="is_active")
    @property
    def raw_is_active(self) -> bool:
        return self.is_active

    @computed_field(alias="last_tested_at")
    @property
    def raw_last_tested_at(self) -> str | None:
        return self.last_tested_at


class DRSiteWrite(DisplayModel):
    name: str | None = None
    code: str | None = None
    description: str | None = None
    site_type: str | None = None
    location: str | None = None
    capacity: int | None = None
    rto: str | None = None
    rpo: str | None = None
    is_primary: bool | None = None
    is_active: bool | None = None
    notes: str | None = None


class BCPTest(DisplayModel):
    id: str
    name: str = ""
    type: str
    date: str
    status: str
    duration_minutes: int | float | None = None
    notes: str | None = None
    service_ids: list[str] | None = None
    dr_target_id: str | None = None


class BCPTestCreate(DisplayModel):
    name: str
    type: str = "BCP"
    date: str
    status: str = "Planned"
    duration_minutes: int | None = None
    notes: str | None = None
    service_ids: list[str] = []
    dr_target_id: str | None = None


class BCPTestUpdate(DisplayModel):
    name: str | None = None
    type: str | None = None
    date: str | None = None
    status: str | None = None
    duration_minutes: int | None = None
    notes: str | None = None
    service_ids: list[str] | None = None
    dr_target_id: str | None = None


class BCPPlan(DisplayModel):
    """The organisation's business continuity plan.

    Only ``lastUpdated`` is camelCased; the extended plan attributes keep
    their persistence keys.
    """

    last_updated: str = Field(alias="lastUpdated")
    status: str = "Draft"
    sections: list[Any] = []
    id: int | None = None
    title: str = "Business continuity plan"
    version: str = "1.0"
    description: str = ""
    effective_date: str | None = None
    review_date: str | None = None
    last_reviewed_at: str | None = None
    owner_id: int | None = None
    owner_name: str = ""
    objectives: str = ""
    scope: str = ""
    assumptions: str = ""
    emergency_contacts: list[Any] = []
    communication_plan: str = ""
    activation_triggers: list[Any] = []

    class Config:
        alias_generator = None
        populate_by_name = True


class BCPPlanUpdate(DisplayModel):
    status: str | None = None
    sections: list[Any] | None = None
    title: str | None = None
    version: str | None = None
    description: str | None = None
    objectives: str | None = None
    scope: str | None = None
    assumptions: str | None = None
    emergency_contacts: list[Any] | None = None
    communication_plan: str | None = None
    activation_triggers: list[Any] | None = None
    owner_id: int | None = None
    effective_date: str | None = None
    review_date: str | None = None

    class Config:
        alias_generator = None
        populate_by_name = True


class DRPlan(DisplayModel):
    last_updated: str
    rto: str = "4 hours"
    rpo: str = "1 hour"
    sites: list[DRSite] = []


class DRPlanUpdate(DisplayModel):
    rto: str | None = None
    rpo: str | None = None
