"""
API tests for categories and devices (public reads, admin CRUD)
"""

import pytest

from conftest import category_payload, device_payload


class TestScenario:

    def test_create_category_device_and_list(self, admin_client, client):
        resp = admin_client.post("/api/device-categories", json=category_payload())
        assert resp.status_code == 201
        assert resp.get_json() == {"id": 1, "name": "Lathes", "icon": "precision_manufacturing"}

        resp = admin_client.post("/api/devices", json=device_payload(category_id=1))
        assert resp.status_code == 201
        device = resp.get_json()
        assert device["id"] == 1
        assert device["categoryId"] == 1
        assert device["mediaItems"] == []

        resp = client.get("/api/categories/1/devices")
        assert resp.status_code == 200
        assert resp.get_json() == [device]

    def test_delete_then_get_is_not_found(self, admin_client, client):
        admin_client.post("/api/device-categories", json=category_payload())
        admin_client.post("/api/devices", json=device_payload())

        assert admin_client.delete("/api/devices/1").status_code == 200

        resp = client.get("/api/devices/1")
        assert resp.status_code == 404
        assert resp.get_json() == {"message": "Device not found"}


class TestPublicReads:

    def test_empty_catalog(self, client):
        assert client.get("/api/device-categories").get_json() == []
        assert client.get("/api/categories/7/devices").get_json() == []

    def test_get_category(self, admin_client, client):
        admin_client.post("/api/device-categories", json=category_payload())

        assert client.get("/api/device-categories/1").get_json()["name"] == "Lathes"
        assert client.get("/api/device-categories/2").status_code == 404

    def test_get_device_wire_format(self, admin_client, client):
        admin_client.post("/api/device-categories", json=category_payload())
        admin_client.post("/api/devices", json=device_payload())

        device = client.get("/api/devices/1").get_json()
        assert set(device) == {
            "id", "name", "icon", "shortDescription", "categoryId", "specifications",
            "materials", "safetyRequirements", "usageInstructions", "troubleshooting",
            "mediaItems",
        }
        assert device["usageInstructions"][0]["title"] == "Secure the work"

    def test_non_integer_id(self, client):
        assert client.get("/api/devices/abc").status_code == 404


class TestAdminGate:

    @pytest.mark.parametrize("method, url, body", [
        ("get", "/api/devices", None),
        ("post", "/api/devices", device_payload()),
        ("patch", "/api/devices/1", {"name": "x"}),
        ("delete", "/api/devices/1", None),
        ("post", "/api/device-categories", category_payload()),
        ("delete", "/api/device-categories/1", None),
    ])
    def test_anonymous_and_non_admin(self, client, user_client, method, url, body):
        anon = getattr(client, method)(url, json=body)
        assert anon.status_code == 401

        non_admin = getattr(user_client, method)(url, json=body)
        assert non_admin.status_code == 403
        assert non_admin.get_json() == {"message": "Admin privileges required"}

    def test_admin_lists_all_devices(self, admin_client):
        admin_client.post("/api/device-categories", json=category_payload())
        admin_client.post("/api/device-categories", json=category_payload(name="Mills"))
        admin_client.post("/api/devices", json=device_payload(category_id=1))
        admin_client.post("/api/devices", json=device_payload(category_id=2, name="Mill"))

        names = [d["name"] for d in admin_client.get("/api/devices").get_json()]
        assert names == ["Basic Lathe", "Mill"]


class TestDeviceValidation:

    def test_missing_fields(self, admin_client):
        admin_client.post("/api/device-categories", json=category_payload())
        payload = device_payload()
        del payload["troubleshooting"]

        resp = admin_client.post("/api/devices", json=payload)
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["message"] == "Invalid request body"
        assert any(e["field"] == "troubleshooting" for e in body["errors"])

    def test_not_json(self, admin_client):
        resp = admin_client.post("/api/devices", data="name=x",
                                 content_type="application/x-www-form-urlencoded")
        assert resp.status_code == 400

    def test_unknown_category(self, admin_client):
        resp = admin_client.post("/api/devices", json=device_payload(category_id=5))
        assert resp.status_code == 400
        assert "Category 5 does not exist" in resp.get_json()["message"]

    def test_bad_media_item(self, admin_client):
        admin_client.post("/api/device-categories", json=category_payload())
        resp = admin_client.post("/api/devices", json=device_payload(mediaItems=[
            {"title": "Clip", "url": "/uploads/v.mp4", "type": "hologram"},
        ]))
        assert resp.status_code == 400

    def test_media_items_round_trip_camel_case(self, admin_client):
        admin_client.post("/api/device-categories", json=category_payload())
        resp = admin_client.post("/api/devices", json=device_payload(mediaItems=[
            {"title": "Chuck", "url": "/uploads/c.png", "type": "diagram",
             "relatedSection": "usageInstructions", "relatedInstructionIndex": 0},
        ]))
        item = resp.get_json()["mediaItems"][0]
        assert item["relatedSection"] == "usageInstructions"
        assert item["relatedInstructionIndex"] == 0
        assert item["id"]

    def test_blank_category_name(self, admin_client):
        resp = admin_client.post("/api/device-categories", json={"name": "   ", "icon": "build"})
        assert resp.status_code == 400


class TestDeviceUpdate:

    @pytest.fixture
    def seeded(self, admin_client):
        admin_client.post("/api/device-categories", json=category_payload())
        admin_client.post("/api/device-categories", json=category_payload(name="Mills"))
        admin_client.post("/api/devices", json=device_payload())
        return admin_client

    def test_partial_update(self, seeded, client):
        resp = seeded.patch("/api/devices/1", json={"shortDescription": "Updated text"})
        assert resp.status_code == 200
        assert resp.get_json()["shortDescription"] == "Updated text"

        device = client.get("/api/devices/1").get_json()
        assert device["shortDescription"] == "Updated text"
        assert device["name"] == "Basic Lathe"

    def test_move_to_other_category(self, seeded, client):
        seeded.patch("/api/devices/1", json={"categoryId": 2})

        assert client.get("/api/categories/1/devices").get_json() == []
        assert len(client.get("/api/categories/2/devices").get_json()) == 1

    def test_move_to_unknown_category(self, seeded):
        assert seeded.patch("/api/devices/1", json={"categoryId": 9}).status_code == 400

    def test_explicit_null_rejected(self, seeded):
        assert seeded.patch("/api/devices/1", json={"name": None}).status_code == 400

    def test_unknown_device(self, seeded):
        assert seeded.patch("/api/devices/42", json={"name": "x"}).status_code == 404
        assert seeded.delete("/api/devices/42").status_code == 404


class TestCategoryDelete:

    def test_conflict_while_in_use(self, admin_client, client):
        admin_client.post("/api/device-categories", json=category_payload())
        admin_client.post("/api/devices", json=device_payload())

        resp = admin_client.delete("/api/device-categories/1")
        assert resp.status_code == 409
        assert "reassign or delete" in resp.get_json()["message"]
        assert len(client.get("/api/device-categories").get_json()) == 1

    def test_delete_empty_category(self, admin_client, client):
        admin_client.post("/api/device-categories", json=category_payload())

        assert admin_client.delete("/api/device-categories/1").status_code == 200
        assert client.get("/api/device-categories").get_json() == []
        assert admin_client.delete("/api/device-categories/1").status_code == 404
