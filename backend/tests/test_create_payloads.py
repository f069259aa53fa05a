"""Create payloads leave out every optional key the caller did not fill in."""
import pytest

from govdash.adapters.bcp import adapt_bcp_test_create, adapt_business_service_create
from govdash.adapters.monitoring import adapt_kri_value
from govdash.adapters.risk import adapt_assessment_create, adapt_risk_create
from govdash.adapters.treatment import (
    adapt_action_create, adapt_treatment_create, completion_payload,
)
from govdash.adapters.user import adapt_user_create
from govdash.schemas.bcp import BCPServiceCreate, BCPTestCreate
from govdash.schemas.monitoring import KRIValueUpdate
from govdash.schemas.risk import AssessmentCreate, RiskCreate
from govdash.schemas.treatment import ActionCreate, ActionDraft, TreatmentCreate
from govdash.schemas.user import UserCreate

MINIMAL_PAYLOADS = {
    "risk": lambda: adapt_risk_create(RiskCreate(title="t"), 1),
    "assessment": lambda: adapt_assessment_create(AssessmentCreate(risk_id="RISK-001", likelihood=1, impact=1), 1),
    "treatment": lambda: adapt_treatment_create(TreatmentCreate()),
    "action": lambda: adapt_action_create(ActionCreate(title="t")),
    "service": lambda: adapt_business_service_create(BCPServiceCreate(name="Payments")),
    "bcp_test": lambda: adapt_bcp_test_create(BCPTestCreate(name="Drill", date="2024-05-01")),
    "user": lambda: adapt_user_create(UserCreate(email="a@b.c", full_name="A", password="pw")),
    "kri_value": lambda: adapt_kri_value(KRIValueUpdate(value=3)),
}


@pytest.mark.parametrize("name", MINIMAL_PAYLOADS)
def test_no_null_values(name):
    payload = MINIMAL_PAYLOADS[name]()
    assert None not in payload.values()


class TestMinimalPayloads:
    def test_action(self):
        assert adapt_action_create(ActionCreate(title="t")) == {"title": "t", "priority": "medium"}

    def test_treatment_without_risk(self):
        payload = adapt_treatment_create(TreatmentCreate(actions=[ActionDraft(title="a")]))
        assert "risk_id" not in payload
        assert payload["actions"] == [{"title": "a", "is_completed": False}]

    def test_user(self):
        payload = adapt_user_create(UserCreate(email="a@b.c", full_name="A", password="pw"))
        assert payload == {"email": "a@b.c", "full_name": "A", "password": "pw", "is_active": True}

    def test_service(self):
        payload = adapt_business_service_create(BCPServiceCreate(name="Payments"))
        assert payload == {"name": "Payments", "criticality": "medium", "dependencies": []}

    def test_bcp_test(self):
        payload = adapt_bcp_test_create(BCPTestCreate(name="Drill", date="2024-05-01"))
        assert payload == {"name": "Drill", "test_type": "bcp", "scheduled_date": "2024-05-01", "status": "planned"}

    def test_completion_without_notes(self):
        body = ActionCreate(title="t", status="Done", evidence_link="https://e/1")
        assert completion_payload(body) == {"evidence_url": "https://e/1"}
