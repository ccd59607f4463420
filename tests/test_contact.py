"""
Tests for contact intake and the plan catalog endpoints
"""
import pytest

pytestmark = pytest.mark.integration

LEAD = {
    "name": "  Dana Lead ",
    "email": "not-an-email",
    "phone": "",
    "message": "Interested in the Pro plan\n",
}


class TestContactForms:
    """Tests for public submission and admin review"""

    def test_anonymous_submission_stored_verbatim(self, client, admin):
        response = client.post("/v1/contact-forms", json=LEAD)
        assert response.status_code == 201
        contact_id = response.json()["id"]

        stored = client.get(f"/v1/contact-forms/{contact_id}", headers=admin).json()
        for field, value in LEAD.items():
            assert stored[field] == value
        assert stored["id"] == contact_id
        assert stored["submitted_at"] > 0

    def test_admin_lists_all(self, client, admin, agent):
        ids = {client.post("/v1/contact-forms", json=LEAD).json()["id"] for _ in range(2)}
        ids.add(client.post("/v1/contact-forms", json=LEAD, headers=agent).json()["id"])

        response = client.get("/v1/contact-forms", headers=admin)
        assert response.status_code == 200
        assert {form["id"] for form in response.json()} == ids
        assert len(ids) == 3

    def test_non_admin_cannot_read(self, client, agent):
        contact_id = client.post("/v1/contact-forms", json=LEAD).json()["id"]
        assert client.get("/v1/contact-forms", headers=agent).status_code == 403
        assert client.get(f"/v1/contact-forms/{contact_id}", headers=agent).status_code == 403

    def test_anonymous_cannot_read(self, client):
        assert client.get("/v1/contact-forms").status_code == 401

    @pytest.mark.parametrize("contact_id", ["c999", "999", "garbage"])
    def test_unknown_form(self, client, admin, contact_id):
        response = client.get(f"/v1/contact-forms/{contact_id}", headers=admin)
        assert response.status_code == 404


class TestPlanEndpoints:
    """Tests for the public plan catalog"""

    def test_list_plans_anonymous(self, client):
        response = client.get("/v1/plans")
        assert response.status_code == 200
        plans = response.json()
        assert [p["id"] for p in plans] == ["essential", "pro", "concierge"]
        assert plans[1]["popular"] is True

    def test_get_plan(self, client):
        response = client.get("/v1/plans/essential")
        assert response.status_code == 200
        assert response.json()["monthly_price"] == 99

    def test_unknown_plan(self, client):
        assert client.get("/v1/plans/platinum").status_code == 404

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
