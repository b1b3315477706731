"""Tests for maintenance request routes and status transitions."""

from datetime import datetime

from models import MaintenanceRequest, MaintenanceStatus

from conftest import OTHER_USER_ID


def _payload(prop, tenant, **overrides) -> dict:
    data = {
        "title": "Leaking sink",
        "description": "Kitchen sink drips constantly under the cabinet",
        "property_id": prop.id,
        "tenant_id": tenant.id,
        "priority": "HIGH",
        "category": "PLUMBING",
    }
    data.update(overrides)
    return data


class TestSetStatus:
    """Test the completed_at bookkeeping on the model."""

    def test_completing_stamps_completed_at(self) -> None:
        req = MaintenanceRequest(title="t", description="d")
        req.set_status(MaintenanceStatus.COMPLETED)
        assert req.status == MaintenanceStatus.COMPLETED
        assert isinstance(req.completed_at, datetime)

    def test_reopening_clears_completed_at(self) -> None:
        req = MaintenanceRequest(title="t", description="d")
        req.set_status(MaintenanceStatus.COMPLETED)
        req.set_status(MaintenanceStatus.IN_PROGRESS)
        assert req.completed_at is None

    def test_completing_twice_keeps_first_stamp(self) -> None:
        req = MaintenanceRequest(title="t", description="d")
        req.set_status(MaintenanceStatus.COMPLETED)
        first = req.completed_at
        req.set_status(MaintenanceStatus.COMPLETED)
        assert req.completed_at == first


class TestCreateRequest:
    def test_create(self, client, factory) -> None:
        prop = factory.property(name="Harbor View")
        tenant = factory.tenant(factory.unit(prop), first_name="Ana", last_name="Lima")

        response = client.post("/api/maintenance", json=_payload(prop, tenant))

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "OPEN"
        assert body["priority"] == "HIGH"
        assert body["completed_at"] is None
        assert body["property_name"] == "Harbor View"
        assert body["tenant_name"] == "Ana Lima"

    def test_tenant_must_live_in_property(self, client, factory) -> None:
        prop = factory.property(name="First")
        other_prop = factory.property(name="Second")
        outsider = factory.tenant(factory.unit(other_prop))

        response = client.post("/api/maintenance", json=_payload(prop, outsider))

        assert response.status_code == 404
        assert response.json() == {"detail": "Tenant not found"}

    def test_property_of_other_user(self, client, factory) -> None:
        prop = factory.property(user_id=OTHER_USER_ID)
        tenant = factory.tenant(factory.unit(prop))
        assert client.post("/api/maintenance", json=_payload(prop, tenant)).status_code == 404

    def test_description_too_short(self, client, factory) -> None:
        prop = factory.property()
        tenant = factory.tenant(factory.unit(prop))
        response = client.post("/api/maintenance", json=_payload(prop, tenant, description="short"))
        assert response.status_code == 422


class TestListRequests:
    def test_filters(self, client, factory) -> None:
        prop = factory.property()
        tenant = factory.tenant(factory.unit(prop))
        factory.request(prop, tenant, title="Open one", created_at=datetime(2026, 1, 1))
        factory.request(prop, tenant, title="Done one", status=MaintenanceStatus.COMPLETED,
                        created_at=datetime(2026, 1, 2))
        theirs = factory.property(user_id=OTHER_USER_ID)
        factory.request(theirs, factory.tenant(factory.unit(theirs)), title="Theirs")

        all_titles = [r["title"] for r in client.get("/api/maintenance").json()]
        completed = client.get("/api/maintenance", params={"status": "COMPLETED"}).json()
        by_tenant = client.get("/api/maintenance", params={"tenant_id": tenant.id}).json()

        assert all_titles == ["Done one", "Open one"]
        assert [r["title"] for r in completed] == ["Done one"]
        assert len(by_tenant) == 2

    def test_get_other_users_request(self, client, factory) -> None:
        theirs = factory.property(user_id=OTHER_USER_ID)
        req = factory.request(theirs, factory.tenant(factory.unit(theirs)))
        assert client.get(f"/api/maintenance/{req.id}").status_code == 404


class TestUpdateRequest:
    def test_complete_then_reopen(self, client, factory) -> None:
        prop = factory.property()
        req = factory.request(prop, factory.tenant(factory.unit(prop)))

        completed = client.patch(f"/api/maintenance/{req.id}", json={"status": "COMPLETED", "cost": 120})
        reopened = client.patch(f"/api/maintenance/{req.id}", json={"status": "IN_PROGRESS"})

        assert completed.status_code == 200
        assert completed.json()["status"] == "COMPLETED"
        assert completed.json()["completed_at"] is not None
        assert float(completed.json()["cost"]) == 120.0
        assert reopened.json()["status"] == "IN_PROGRESS"
        assert reopened.json()["completed_at"] is None

    def test_null_priority_is_ignored(self, client, factory) -> None:
        prop = factory.property()
        req = factory.request(prop, factory.tenant(factory.unit(prop)))

        response = client.patch(f"/api/maintenance/{req.id}", json={"priority": None, "assigned_to": "Bob"})

        assert response.status_code == 200
        assert response.json()["priority"] == "MEDIUM"
        assert response.json()["assigned_to"] == "Bob"

    def test_delete(self, client, factory) -> None:
        prop = factory.property()
        req = factory.request(prop, factory.tenant(factory.unit(prop)))
        assert client.delete(f"/api/maintenance/{req.id}").status_code == 204
        assert client.get(f"/api/maintenance/{req.id}").status_code == 404
