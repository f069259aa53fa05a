from govdash.adapters.codec import encode, decode
from govdash.adapters.categories import category_label
from govdash.adapters.risk import (
    adapt_risk, adapt_risk_create, adapt_risk_update, adapt_risk_status,
    adapt_category, adapt_assessment, adapt_assessment_create, adapt_assessment_update,
)
from govdash.adapters.treatment import (
    adapt_treatment, adapt_action, adapt_treatment_create, adapt_treatment_update,
    adapt_action_create, adapt_action_update, completion_payload,
)
from govdash.adapters.bcp import (
    adapt_bcp_plan, adapt_bcp_plan_update, adapt_dr_plan, adapt_dr_plan_update,
    adapt_business_service, adapt_business_service_create, adapt_business_service_update,
    adapt_dr_site, adapt_dr_site_write, adapt_bcp_test, adapt_bcp_test_create,
    adapt_bcp_test_update,
)
from govdash.adapters.monitoring import (
    adapt_kri, adapt_kri_value, adapt_incident, incident_filters, adapt_audit_log,
)
from govdash.adapters.user import adapt_user, adapt_user_create, adapt_user_update

__all__ = [
    "encode", "decode", "category_label",
    "adapt_risk", "adapt_risk_create", "adapt_risk_update", "adapt_risk_status",
    "adapt_category", "adapt_assessment", "adapt_assessment_create", "adapt_assessment_update",
    "adapt_treatment", "adapt_action", "adapt_treatment_create", "adapt_treatment_update",
    "adapt_action_create", "adapt_action_update", "completion_payload",
    "adapt_business_service", "adapt_business_service_create", "adapt_business_service_update",
    "adapt_dr_site", "adapt_dr_site_write", "adapt_bcp_test", "adapt_bcp_test_create",
    "adapt_bcp_test_update", "adapt_bcp_plan", "adapt_bcp_plan_update", "adapt_dr_plan",
    "adapt_dr_plan_update",
    "adapt_kri", "adapt_kri_value", "adapt_incident", "incident_filters", "adapt_audit_log",
    "adapt_user", "adapt_user_create", "adapt_user_update",
]
