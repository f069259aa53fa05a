from fastapi.testclient import TestClient

from govdash.main import app

CATEGORIES = [
    {"id": 8, "code": "security", "name": "Security"},
    {"id": 2, "code": "financial", "name": "Financial"},
]

RISK = {
    "id": 7,
    "title": "Vendor outage",
    "status": "monitoring",
    "risk_level": "high",
    "category": {"code": "security"},
    "owner": {"full_name": "Lina Haddad"},
    "owner_id": 3,
    "category_id": 8,
}


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestLifespan:
    def test_shutdown_drops_closed_backend(self, persistence):
        backend = persistence.backend()
        app.state.backend = backend
        with TestClient(app):
            assert app.state.backend is backend
        assert backend.http.is_closed
        assert app.state.backend is None

    def test_restart_builds_a_fresh_backend(self, persistence):
        closed = persistence.backend()
        app.state.backend = closed
        with TestClient(app):
            pass
        with TestClient(app):
            assert app.state.backend is not closed
            assert not app.state.backend.http.is_closed


class TestRisks:
    def test_list_is_paginated_and_adapted(self, client, persistence):
        persistence.on("GET", "/risks", [RISK], meta={"total": 41, "page": 2, "per_page": 20})
        response = client.get("/api/risks", params={"page": 2, "page_size": 20})
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 41
        assert body["pageSize"] == 20
        item = body["items"][0]
        assert item["id"] == "RISK-007"
        assert item["category"] == "Security"
        assert item["status"] == "Monitoring"
        assert item["level"] == "High"
        assert item["_backendId"] == 7
        assert item["_backendStatus"] == "monitoring"

        _, _, params, _, _ = persistence.requests("GET", "/risks")[0]
        assert params == {"page": "2", "per_page": "20"}

    def test_filters_are_translated(self, client, persistence):
        persistence.on("GET", "/risks/categories", CATEGORIES)
        persistence.on("GET", "/risks", [])
        client.get("/api/risks", params={"status": "Monitoring", "category": "Security"})
        _, _, params, _, _ = persistence.requests("GET", "/risks")[0]
        assert params["status"] == "monitoring"
        assert params["category_id"] == "8"

    def test_get_decodes_display_id(self, client, persistence):
        persistence.on("GET", "/risks/7", RISK)
        response = client.get("/api/risks/RISK-007")
        assert response.status_code == 200
        assert response.json()["owner"] == "Lina Haddad"

    def test_backend_error_is_rendered(self, client, persistence):
        response = client.get("/api/risks/RISK-404")
        assert response.status_code == 404
        assert response.json() == {"detail": "Not found", "error_code": "NOT_FOUND"}

    def test_create_resolves_category(self, client, persistence):
        persistence.on("GET", "/risks/categories", CATEGORIES)
        persistence.on("POST", "/risks", {**RISK, "id": 12})
        response = client.post("/api/risks", json={"title": "New", "category": "Financial", "ownerId": 3})
        assert response.status_code == 201
        assert response.json()["id"] == "RISK-012"
        _, _, _, body, _ = persistence.requests("POST", "/risks")[0]
        assert body == {"title": "New", "description": "", "category_id": 2, "owner_id": 3}

    def test_create_with_unreachable_categories_uses_fallback(self, client, persistence):
        persistence.fail("GET", "/risks/categories", 503, "UNAVAILABLE", "down")
        persistence.on("POST", "/risks", RISK)
        response = client.post("/api/risks", json={"title": "New", "category": "Environmental"})
        assert response.status_code == 201
        _, _, _, body, _ = persistence.requests("POST", "/risks")[0]
        assert body["category_id"] == 7

    def test_update_sends_minimal_patch(self, client, persistence):
        persistence.on("PUT", "/risks/7", RISK)
        client.put("/api/risks/RISK-007", json={"title": "", "description": "Edited", "ownerId": None})
        _, _, _, body, _ = persistence.requests("PUT", "/risks/7")[0]
        assert body == {"description": "Edited", "owner_id": None}

    def test_status_change(self, client, persistence):
        persistence.on("PATCH", "/risks/7/status", {**RISK, "status": "closed"})
        response = client.patch("/api/risks/RISK-007/status", json={"status": "Closed"})
        assert response.json()["status"] == "Closed"
        _, _, _, body, _ = persistence.requests("PATCH", "/risks/7/status")[0]
        assert body == {"status": "closed"}

    def test_authorization_is_forwarded(self, client, persistence):
        persistence.on("GET", "/risks/7", RISK)
        client.get("/api/risks/RISK-007", headers={"Authorization": "Bearer user-token"})
        headers = persistence.requests("GET", "/risks/7")[0][4]
        assert headers["authorization"] == "Bearer user-token"

    def test_anonymous_request_carries_no_token(self, client, persistence):
        persistence.on("GET", "/risks/7", RISK)
        assert client.get("/api/risks/RISK-007").status_code == 200
        headers = persistence.requests("GET", "/risks/7")[0][4]
        assert "authorization" not in headers


class TestCategories:
    def test_categories_route_is_not_shadowed(self, client, persistence):
        persistence.on("GET", "/risks/categories", CATEGORIES)
        response = client.get("/api/risks/categories")
        assert response.status_code == 200
        assert [c["label"] for c in response.json()] == ["Security", "Financial"]

    def test_mutation_invalidates_cache(self, client, persistence):
        persistence.on("GET", "/risks/categories", CATEGORIES)
        persistence.on("PUT", "/risks/categories/8", {"id": 8, "code": "security", "name": "Infosec"})

        assert client.get("/api/risks/categories/resolve", params={"name": "Security"}).json()["id"] == 8
        client.get("/api/risks/categories")
        assert len(persistence.requests("GET", "/risks/categories")) == 1

        client.put("/api/risks/categories/8", json={"name": "Infosec"})
        client.get("/api/risks/categories/resolve", params={"name": "Security"})
        assert len(persistence.requests("GET", "/risks/categories")) == 2

    def test_failed_mutation_still_invalidates(self, client, persistence):
        persistence.on("GET", "/risks/categories", CATEGORIES)
        client.get("/api/risks/categories")
        response = client.delete("/api/risks/categories/99")
        assert response.status_code == 404
        client.get("/api/risks/categories")
        assert len(persistence.requests("GET", "/risks/categories")) == 2


class TestTreatments:
    def test_create_with_no_actions(self, client, persistence):
        persistence.on("POST", "/treatments", {"id": 4, "risk_id": 7, "strategy": "mitigate"})
        response = client.post("/api/treatments", json={"riskId": "RISK-007", "actions": []})
        assert response.status_code == 201
        assert response.json()["id"] == "TPL-004"
        _, _, _, body, _ = persistence.requests("POST", "/treatments")[0]
        assert body["actions"] == []
        assert body["risk_id"] == 7
        assert body["title"] == "Treatment plan - Mitigate"

    def test_list_attaches_actions(self, client, persistence):
        persistence.on("GET", "/treatments/risk/7/plans", [{"id": 1, "risk_id": 7}, {"id": 2, "risk_id": 7}])
        persistence.on("GET", "/treatments/1/actions", [{"id": 10, "is_completed": True}])
        response = client.get("/api/treatments", params={"risk_id": "RISK-007"})
        plans = response.json()
        assert [p["id"] for p in plans] == ["TPL-001", "TPL-002"]
        assert plans[0]["actions"][0]["status"] == "Done"
        assert plans[1]["actions"] == []

    def test_done_action_goes_through_completion(self, client, persistence):
        persistence.on("POST", "/treatments/4/actions", {"id": 15, "is_completed": False})
        persistence.on("POST", "/treatments/actions/15/complete", {"id": 15, "is_completed": True})
        response = client.post(
            "/api/treatments/TPL-004/actions",
            json={"title": "Patch servers", "status": "Done", "evidenceLink": "https://e/15"},
        )
        assert response.json()["status"] == "Done"
        assert response.json()["id"] == "ACT-000015"
        _, _, _, body, _ = persistence.requests("POST", "/treatments/actions/15/complete")[0]
        assert body == {"evidence_url": "https://e/15"}


class TestMonitoring:
    def test_incident_filters(self, client, persistence):
        persistence.on("GET", "/incidents", [{"id": 3, "severity": "critical", "status": "contained"}])
        response = client.get("/api/incidents", params={"severity": "Critical", "status": "Investigating"})
        assert response.json()[0]["riskId"] == ""
        _, _, params, _, _ = persistence.requests("GET", "/incidents")[0]
        assert params == {"severity": "critical", "status": "investigating"}

    def test_kris_for_risk(self, client, persistence):
        persistence.on("GET", "/risks/7/kris", [{"id": 1, "risk_id": 7, "status": "yellow"}])
        response = client.get("/api/kris", params={"risk_id": "RISK-007"})
        assert response.json()[0]["status"] == "yellow"

    def test_audit_logs(self, client, persistence):
        persistence.on("GET", "/audit-logs", [{"id": 1, "action": "delete", "user_name": "ops"}], meta={"total": 1})
        response = client.get("/api/audit", params={"action": "DELETE"})
        item = response.json()["items"][0]
        assert (item["action"], item["actor"]) == ("DELETE", "ops")
        _, _, params, _, _ = persistence.requests("GET", "/audit-logs")[0]
        assert params["action"] == "delete"


class TestBCP:
    def test_get_plan(self, client, persistence):
        persistence.on("GET", "/bcp/plan", {"id": 1, "updated_at": "2024-06-02T08:30:00Z", "status": "approved"})
        body = client.get("/api/bcp/plan").json()
        assert body["lastUpdated"] == "2024-06-02"
        assert body["status"] == "approved"
        assert body["communication_plan"] == ""
        assert body["emergency_contacts"] == []

    def test_update_plan(self, client, persistence):
        persistence.on("PATCH", "/bcp/plan", {"status": "under_review", "scope": "HQ"})
        response = client.patch("/api/bcp/plan", json={"status": "Under Review", "scope": "HQ", "title": ""})
        assert response.status_code == 200
        assert response.json()["scope"] == "HQ"
        _, _, _, body, _ = persistence.requests("PATCH", "/bcp/plan")[0]
        assert body == {"status": "under_review", "scope": "HQ"}

    def test_get_dr_plan(self, client, persistence):
        persistence.on("GET", "/bcp/dr-plan", {
            "last_updated": "2024-04-10", "rpo": "15 minutes",
            "sites": [{"id": 2, "name": "Secondary DC", "site_type": "hot", "is_primary": False}],
        })
        body = client.get("/api/bcp/dr-plan").json()
        assert body["lastUpdated"] == "2024-04-10"
        assert (body["rto"], body["rpo"]) == ("4 hours", "15 minutes")
        site = body["sites"][0]
        assert site["id"] == "DR-002"
        assert site["siteType"] == site["site_type"] == "hot"
        assert site["isPrimary"] is site["is_primary"] is False

    def test_update_dr_plan(self, client, persistence):
        persistence.on("PATCH", "/bcp/dr-plan", {"rto": "2 hours"})
        assert client.patch("/api/bcp/dr-plan", json={"rto": "2 hours"}).json()["rto"] == "2 hours"
        _, _, _, body, _ = persistence.requests("PATCH", "/bcp/dr-plan")[0]
        assert body == {"rto": "2 hours"}

    def test_create_dr_test(self, client, persistence):
        persistence.on("POST", "/bcp/tests", {"id": 2, "test_type": "dr", "status": "planned", "dr_site_id": 4})
        response = client.post(
            "/api/bcp/tests",
            json={"name": "Failover", "type": "DR", "date": "2024-05-01", "drTargetId": "DR-004"},
        )
        assert response.status_code == 201
        assert response.json()["drTargetId"] == "DR-004"
        _, _, _, body, _ = persistence.requests("POST", "/bcp/tests")[0]
        assert body["dr_site_id"] == 4
        assert body["test_type"] == "dr"


class TestUsers:
    def test_roles_route_precedes_user_lookup(self, client, persistence):
        persistence.on("GET", "/users/roles", [{"id": 1, "code": "viewer"}])
        assert client.get("/api/users/roles").json() == [{"id": 1, "code": "viewer"}]

    def test_get_user(self, client, persistence):
        persistence.on("GET", "/users/5", {"id": 5, "full_name": "Amal", "role": "viewer", "role_name": "Admin"})
        response = client.get("/api/users/5")
        assert response.json()["role"] == "Admin"
