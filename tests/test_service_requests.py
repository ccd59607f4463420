"""
Tests for the service request engine
"""
import pytest

from conftest import ADMIN, AGENT, OTHER_AGENT, auth

pytestmark = pytest.mark.integration

STATUSES = ["Pending", "Scheduled", "In Progress", "Completed"]


def new_request(client, headers, property_id="p1", **overrides):
    payload = {
        "property_id": property_id,
        "title": "Broken blinds",
        "description": "Living room blinds stuck",
        "urgency": "Low",
    }
    payload.update(overrides)
    return client.post("/v1/service-requests", json=payload, headers=headers)


class TestCreateServiceRequest:
    """Tests for filing requests"""

    def test_first_request_id_and_triage(self, client, admin, agent, listed_property):
        response = new_request(
            client,
            agent,
            title="Leaky faucet",
            description="Kitchen sink drips",
            urgency="Medium",
        )
        assert response.status_code == 201
        assert response.json() == {"id": "r1"}

        updated = client.patch("/v1/service-requests/r1/status", json={"status": "Scheduled"}, headers=admin)
        assert updated.status_code == 200
        assert updated.json()["status"] == "Scheduled"

        fetched = client.get("/v1/service-requests/r1", headers=agent).json()
        assert fetched["status"] == "Scheduled"
        assert fetched["urgency"] == "Medium"

    def test_fresh_request_is_pending(self, client, agent, service_request_id):
        request = client.get(f"/v1/service-requests/{service_request_id}", headers=agent).json()
        assert request["status"] == "Pending"
        assert request["property_id"] == "p1"
        assert request["title"] == "Leaky faucet"
        assert request["created_by"] == AGENT
        assert request["photos"] == []
        assert request["created_at"] == request["updated_at"]

    def test_missing_property(self, client, agent, service_request_id):
        response = new_request(client, agent, property_id="nope")
        assert response.status_code == 404
        assert len(client.get("/v1/service-requests", headers=agent).json()) == 1

    def test_showstopper_urgency(self, client, agent, listed_property):
        request_id = new_request(client, agent, urgency="Inspection Showstopper").json()["id"]
        request = client.get(f"/v1/service-requests/{request_id}", headers=agent).json()
        assert request["urgency"] == "Inspection Showstopper"

    @pytest.mark.parametrize("urgency", ["Critical", "medium", ""])
    def test_unknown_urgency(self, client, agent, listed_property, urgency):
        response = new_request(client, agent, urgency=urgency)
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_input"

    def test_anonymous_rejected(self, client, listed_property):
        assert new_request(client, None).status_code == 401

    def test_ids_are_distinct(self, client, agent, listed_property):
        ids = [new_request(client, agent).json()["id"] for _ in range(3)]
        assert len(set(ids)) == 3


class TestUpdateStatus:
    """Tests for the admin status workflow"""

    def test_non_admin_forbidden(self, client, agent, service_request_id):
        response = client.patch(
            f"/v1/service-requests/{service_request_id}/status",
            json={"status": "Completed"},
            headers=agent,
        )
        assert response.status_code == 403
        request = client.get(f"/v1/service-requests/{service_request_id}", headers=agent).json()
        assert request["status"] == "Pending"

    def test_admin_without_profile_forbidden(self, client, service_request_id):
        response = client.patch(
            f"/v1/service-requests/{service_request_id}/status",
            json={"status": "Completed"},
            headers=auth(ADMIN),
        )
        assert response.status_code == 403

    def test_any_status_to_any_status(self, client, admin, agent, service_request_id):
        path = f"/v1/service-requests/{service_request_id}"
        previous = client.get(path, headers=agent).json()["updated_at"]

        for status in ["Completed", "Pending", "In Progress", "Scheduled", "Completed"]:
            response = client.patch(f"{path}/status", json={"status": status}, headers=admin)
            assert response.status_code == 200
            request = response.json()
            assert request["status"] == status
            assert request["updated_at"] >= previous
            previous = request["updated_at"]

    @pytest.mark.parametrize("status", STATUSES)
    def test_each_status_reachable(self, client, admin, service_request_id, status):
        response = client.patch(
            f"/v1/service-requests/{service_request_id}/status",
            json={"status": status},
            headers=admin,
        )
        assert response.status_code == 200
        assert response.json()["status"] == status

    def test_same_status_is_noop(self, client, admin, agent, service_request_id):
        path = f"/v1/service-requests/{service_request_id}"
        before = client.get(path, headers=agent).json()

        response = client.patch(f"{path}/status", json={"status": "Pending"}, headers=admin)
        assert response.status_code == 200
        assert response.json() == before

    def test_unknown_status(self, client, admin, service_request_id):
        response = client.patch(
            f"/v1/service-requests/{service_request_id}/status",
            json={"status": "Done"},
            headers=admin,
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("request_id", ["r999", "999", "x"])
    def test_unknown_request(self, client, admin, request_id):
        response = client.patch(
            f"/v1/service-requests/{request_id}/status",
            json={"status": "Scheduled"},
            headers=admin,
        )
        assert response.status_code == 404


class TestPhotos:
    """Tests for photo attachment"""

    def test_photos_appended_in_order(self, client, agent, service_request_id):
        path = f"/v1/service-requests/{service_request_id}"
        previous = client.get(path, headers=agent).json()["updated_at"]
        refs = [f"blob://photos/{n}.jpg" for n in range(4)]

        for count, ref in enumerate(refs, start=1):
            response = client.post(f"{path}/photos", json={"content_ref": ref}, headers=agent)
            assert response.status_code == 201
            request = response.json()
            assert request["photos"] == refs[:count]
            assert request["updated_at"] >= previous
            previous = request["updated_at"]

        assert client.get(path, headers=agent).json()["photos"] == refs

    def test_duplicate_refs_kept(self, client, agent, service_request_id):
        path = f"/v1/service-requests/{service_request_id}/photos"
        client.post(path, json={"content_ref": "blob://a"}, headers=agent)
        response = client.post(path, json={"content_ref": "blob://a"}, headers=agent)
        assert response.json()["photos"] == ["blob://a", "blob://a"]

    def test_missing_request(self, client, agent):
        response = client.post("/v1/service-requests/r42/photos", json={"content_ref": "blob://a"}, headers=agent)
        assert response.status_code == 404

    def test_empty_content_ref(self, client, agent, service_request_id):
        response = client.post(
            f"/v1/service-requests/{service_request_id}/photos",
            json={"content_ref": "  "},
            headers=agent,
        )
        assert response.status_code == 400

    def test_anonymous_rejected(self, client, service_request_id):
        response = client.post(
            f"/v1/service-requests/{service_request_id}/photos",
            json={"content_ref": "blob://a"},
        )
        assert response.status_code == 401


class TestListServiceRequests:
    """Tests for listing and filtering"""

    @pytest.fixture
    def filed(self, client, admin, agent, other_agent, listed_property):
        second = {"id": "p2", "address": "2 Oak Ave", "city": "Frisco", "state": "TX", "zip": "75034"}
        client.post("/v1/properties", json=second, headers=other_agent)

        ids = {
            "faucet": new_request(client, agent, title="Leaky faucet", description="Kitchen sink").json()["id"],
            "paint": new_request(client, agent, title="Touch-up paint", description="Hallway scuffs").json()["id"],
            "roof": new_request(client, other_agent, property_id="p2", title="Roof", description="Missing shingles").json()["id"],
        }
        client.patch(f"/v1/service-requests/{ids['roof']}/status", json={"status": "In Progress"}, headers=admin)
        return ids

    def test_list_all(self, client, agent, filed):
        response = client.get("/v1/service-requests", headers=agent)
        assert response.status_code == 200
        assert {r["id"] for r in response.json()} == set(filed.values())

    def test_filter_by_status(self, client, agent, filed):
        response = client.get("/v1/service-requests", params={"status": "In Progress"}, headers=agent)
        assert [r["id"] for r in response.json()] == [filed["roof"]]

    def test_filter_by_property(self, client, agent, filed):
        response = client.get("/v1/service-requests", params={"property_id": "p1"}, headers=agent)
        assert {r["id"] for r in response.json()} == {filed["faucet"], filed["paint"]}

    def test_search_title_and_description(self, client, agent, filed):
        by_title = client.get("/v1/service-requests", params={"search": "FAUCET"}, headers=agent)
        assert [r["id"] for r in by_title.json()] == [filed["faucet"]]

        by_description = client.get("/v1/service-requests", params={"search": "shingles"}, headers=agent)
        assert [r["id"] for r in by_description.json()] == [filed["roof"]]

    def test_search_is_literal(self, client, agent, filed):
        discount = new_request(client, agent, title="Replace 100% of bulbs").json()["id"]

        percent = client.get("/v1/service-requests", params={"search": "%"}, headers=agent)
        assert [r["id"] for r in percent.json()] == [discount]

        underscore = client.get("/v1/service-requests", params={"search": "_"}, headers=agent)
        assert underscore.json() == []

    def test_unknown_status_filter(self, client, agent, filed):
        response = client.get("/v1/service-requests", params={"status": "Archived"}, headers=agent)
        assert response.status_code == 400

    def test_anonymous_rejected(self, client):
        assert client.get("/v1/service-requests").status_code == 401


class TestOwnerScopedServiceRequests:
    """Tests for SCOPE_LISTS_TO_OWNER on request listing"""

    @pytest.fixture
    def settings(self, settings):
        return settings.model_copy(update={"scope_lists_to_owner": True})

    @pytest.fixture
    def filed(self, client, agent, other_agent, listed_property):
        return {
            AGENT: new_request(client, agent, title="Leaky faucet").json()["id"],
            OTHER_AGENT: new_request(client, other_agent, title="Roof").json()["id"],
        }

    def test_user_sees_only_own(self, client, agent, other_agent, filed):
        own = client.get("/v1/service-requests", headers=agent).json()
        assert [(r["id"], r["created_by"]) for r in own] == [(filed[AGENT], AGENT)]

        theirs = client.get("/v1/service-requests", headers=other_agent).json()
        assert [(r["id"], r["created_by"]) for r in theirs] == [(filed[OTHER_AGENT], OTHER_AGENT)]

    def test_filters_apply_within_scope(self, client, agent, filed):
        response = client.get("/v1/service-requests", params={"search": "roof"}, headers=agent)
        assert response.json() == []

    def test_admin_sees_all(self, client, admin, filed):
        response = client.get("/v1/service-requests", headers=admin)
        assert {r["id"] for r in response.json()} == set(filed.values())


class TestAuditTrail:
    """Tests for audit entries written alongside changes"""

    def test_request_lifecycle_is_audited(self, client, admin, agent, service_request_id):
        path = f"/v1/service-requests/{service_request_id}"
        client.patch(f"{path}/status", json={"status": "Scheduled"}, headers=admin)
        client.post(f"{path}/photos", json={"content_ref": "blob://a"}, headers=agent)

        response = client.get(
            "/v1/audit",
            params={"resource_type": "service_request", "resource_id": service_request_id},
            headers=admin,
        )
        assert response.status_code == 200
        entries = response.json()
        assert {e["action"] for e in entries} == {
            "service_request_created",
            "status_changed",
            "photo_attached",
        }
        status_change = next(e for e in entries if e["action"] == "status_changed")
        assert status_change["actor"] == ADMIN
        assert status_change["details"] == {"from": "Pending", "to": "Scheduled"}

    def test_noop_status_not_audited(self, client, admin, service_request_id):
        client.patch(
            f"/v1/service-requests/{service_request_id}/status",
            json={"status": "Pending"},
            headers=admin,
        )
        entries = client.get(
            "/v1/audit",
            params={"resource_id": service_request_id},
            headers=admin,
        ).json()
        assert [e["action"] for e in entries] == ["service_request_created"]

    def test_bootstrap_is_audited(self, client, admin):
        entries = client.get("/v1/audit", params={"resource_type": "principal"}, headers=admin).json()
        assert [(e["resource_id"], e["actor"]) for e in entries] == [(ADMIN, None)]

    def test_non_admin_forbidden(self, client, agent):
        assert client.get("/v1/audit", headers=agent).status_code == 403
