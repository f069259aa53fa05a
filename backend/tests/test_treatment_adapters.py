from govdash.adapters.treatment import (
    adapt_action, adapt_action_create, adapt_action_update, adapt_treatment,
    adapt_treatment_create, adapt_treatment_update, completion_payload,
)
from govdash.schemas.treatment import (
    ActionCreate, ActionDraft, ActionUpdate, TreatmentCreate, TreatmentUpdate,
)


class TestAdaptAction:
    def test_completed_action(self):
        action = adapt_action({
            "id": 42,
            "title": "Sign backup contract",
            "assignee": {"full_name": "Karim"},
            "assignee_id": 9,
            "due_date": "2024-06-30",
            "is_completed": True,
            "evidence_url": "https://evidence.example/42",
        })
        assert action.id == "ACT-000042"
        assert action.owner == "Karim"
        assert action.status == "Done"
        assert action.evidence_link == "https://evidence.example/42"
        assert action.model_dump(by_alias=True)["_assigneeId"] == 9

    def test_missing_assignee_and_completion(self):
        action = adapt_action({"id": 1})
        assert action.owner == "-"
        assert action.status == "In Progress"


class TestAdaptTreatment:
    def test_plan_id_is_always_synthesized(self):
        plan = adapt_treatment({
            "id": 3,
            "code": "TP-9",
            "risk_id": 7,
            "strategy": "transfer",
            "title": "Insure the exposure",
            "status": "approved",
            "progress": 40,
            "actions": [{"id": 1, "is_completed": True}, {"id": 2, "is_completed": False}],
        })
        assert plan.id == "TPL-003"
        assert plan.risk_id == "RISK-007"
        assert plan.approach == "Transfer"
        assert [a.status for a in plan.actions] == ["Done", "In Progress"]
        dumped = plan.model_dump(by_alias=True)
        assert dumped["_backendId"] == 3
        assert dumped["_backendRiskId"] == 7
        assert dumped["_title"] == "Insure the exposure"
        assert dumped["_status"] == "approved"
        assert dumped["_progress"] == 40

    def test_non_list_actions_become_empty(self):
        assert adapt_treatment({"id": 1, "actions": None}).actions == []
        assert adapt_treatment({"id": 1, "strategy": "ignore"}).approach == "Mitigate"


class TestTreatmentCreate:
    def test_empty_actions_stay_an_empty_list(self):
        payload = adapt_treatment_create(TreatmentCreate(risk_id="RISK-007", actions=[]), 7)
        assert payload["actions"] == []
        assert payload["strategy"] == "mitigate"
        assert payload["risk_id"] == 7

    def test_completion_is_exact_match_on_done(self):
        drafts = [
            ActionDraft(title="a", status="Done"),
            ActionDraft(title="b", status="Not Started"),
            ActionDraft(title="c", status="In Progress"),
            ActionDraft(title="d", status="done"),
        ]
        payload = adapt_treatment_create(TreatmentCreate(approach="Avoid", actions=drafts))
        assert [a["is_completed"] for a in payload["actions"]] == [True, False, False, False]
        assert payload["strategy"] == "avoid"

    def test_optional_fields(self):
        payload = adapt_treatment_create(TreatmentCreate(description="Plan", target_date="2024-12-31", estimated_budget=0))
        assert payload["description"] == "Plan"
        assert payload["target_date"] == "2024-12-31"
        assert payload["estimated_budget"] == 0
        assert "description" not in adapt_treatment_create(TreatmentCreate())

    def test_camel_case_draft_input(self):
        body = TreatmentCreate.model_validate({
            "riskId": "RISK-002",
            "_title": "Named",
            "actions": [{"title": "x", "dueDate": "2024-05-01", "_assigneeId": 4}],
        })
        payload = adapt_treatment_create(body, 2)
        assert payload["title"] == "Named"
        assert payload["actions"][0] == {
            "title": "x",
            "due_date": "2024-05-01",
            "assignee_id": 4,
            "is_completed": False,
        }

    def test_update(self):
        assert adapt_treatment_update(TreatmentUpdate()) == {}
        assert adapt_treatment_update(TreatmentUpdate(approach="Accept", title="T")) == {"strategy": "accept", "title": "T"}


class TestActionWrites:
    def test_create_done_defers_to_completion_endpoint(self):
        body = ActionCreate(title="Close gap", status="Done", notes="ok", evidence_link="https://e/1")
        assert "is_completed" not in adapt_action_create(body)
        assert completion_payload(body) == {"notes": "ok", "evidence_url": "https://e/1"}

    def test_create_not_started(self):
        payload = adapt_action_create(ActionCreate(title="Draft", status="Not Started"), assignee_id=6)
        assert payload["is_completed"] is False
        assert payload["assignee_id"] == 6
        assert payload["priority"] == "medium"
        assert completion_payload(ActionCreate(title="Draft")) is None

    def test_update_emits_explicit_nulls(self):
        assert adapt_action_update(ActionUpdate()) == {}
        assert adapt_action_update(ActionUpdate(assignee_id=None, notes=None)) == {"assignee_id": None, "notes": None}

    def test_update_status(self):
        assert adapt_action_update(ActionUpdate(status="In Progress")) == {"is_completed": False}
        assert adapt_action_update(ActionUpdate(status="Done", title="t")) == {"title": "t"}
