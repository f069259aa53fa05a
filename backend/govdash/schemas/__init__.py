from govdash.schemas.risk import (
    Risk, RiskCreate, RiskUpdate, RiskStatusChange, RiskCategory,
    RiskCategoryCreate, RiskCategoryUpdate, Assessment, AssessmentCreate, AssessmentUpdate,
)
from govdash.schemas.treatment import (
    Treatment, TreatmentAction, TreatmentCreate, TreatmentUpdate,
    ActionDraft, ActionCreate, ActionUpdate,
)
from govdash.schemas.bcp import (
    BCPService, BCPServiceCreate, BCPServiceUpdate, DRSite, DRSiteWrite,
    BCPTest, BCPTestCreate, BCPTestUpdate, BCPPlan, BCPPlanUpdate, DRPlan,
    DRPlanUpdate,
)
from govdash.schemas.monitoring import KRI, KRIValueUpdate, Incident, AuditLog
from govdash.schemas.user import User, UserCreate, UserUpdate
from govdash.schemas.common import PaginatedResponse, ErrorResponse, HealthResponse
