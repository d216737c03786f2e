"""HTTP tests for the /retur endpoints."""

import pytest


def _create(client, item="laptop", reason="damaged", **extra):
    return client.post("/retur", json={"item": item, "reason": reason, **extra})


class TestListAndCreate:
    def test_list_empty(self, client):
        response = client.get("/retur")
        assert response.status_code == 200
        assert response.get_json() == []

    def test_create_forces_pending(self, client):
        response = _create(client, status="Approved", resolution="money", id=40)
        assert response.status_code == 201
        assert response.get_json() == {
            "id": 1,
            "item": "laptop",
            "reason": "damaged",
            "status": "Pending",
            "resolution": ""
        }

    def test_list_returns_created_records(self, client):
        _create(client, "laptop")
        _create(client, "phone")
        items = [r["item"] for r in client.get("/retur").get_json()]
        assert items == ["laptop", "phone"]

    @pytest.mark.parametrize("body", ["not json", "[1, 2]", "null"])
    def test_create_rejects_non_object_body(self, client, body):
        response = client.post("/retur", data=body, content_type="application/json")
        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid input"}

    def test_create_rejects_non_text_fields(self, client):
        response = client.post("/retur", json={"item": 12, "reason": "x"})
        assert response.status_code == 400


class TestApproveAndDisapprove:
    def test_approve(self, client):
        _create(client)
        response = client.post("/retur/1/approve", json={"resolution": "item"})
        assert response.status_code == 200
        assert response.get_json()["status"] == "Approved"
        assert response.get_json()["resolution"] == "item"

    def test_approve_bad_resolution(self, client):
        _create(client)
        response = client.post("/retur/1/approve", json={"resolution": "barang"})
        assert response.status_code == 400
        assert response.get_json() == {"error": "Resolution must be 'item' or 'money'"}
        assert client.get("/retur").get_json()[0]["status"] == "Pending"

    def test_approve_unknown(self, client):
        response = client.post("/retur/9/approve", json={"resolution": "money"})
        assert response.status_code == 404
        assert response.get_json() == {"error": "Return not found"}

    def test_approve_bad_id(self, client):
        response = client.post("/retur/abc/approve", json={"resolution": "money"})
        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid ID format"}

    def test_approve_without_body(self, client):
        _create(client)
        response = client.post("/retur/1/approve")
        assert response.status_code == 400

    def test_disapprove(self, client):
        _create(client)
        response = client.post("/retur/1/disapprove")
        assert response.status_code == 200
        assert response.get_json()["status"] == "Rejected"

    def test_disapprove_unknown(self, client):
        assert client.post("/retur/3/disapprove").status_code == 404


class TestDeleteAndUndo:
    def test_delete(self, client):
        _create(client)
        response = client.delete("/retur/1/delete")
        assert response.status_code == 200
        assert response.get_json() == {"message": "Return with ID 1 deleted", "id": 1}
        assert client.get("/retur").get_json() == []

    def test_delete_unknown(self, client):
        assert client.delete("/retur/1/delete").status_code == 404

    def test_delete_bad_id(self, client):
        assert client.delete("/retur/x1/delete").status_code == 400

    def test_undo_empty(self, client):
        response = client.post("/retur/undo")
        assert response.status_code == 400
        assert response.get_json() == {"error": "No returns to undo"}

    def test_undo_restores_full_record(self, client):
        _create(client)
        approved = client.post("/retur/1/approve", json={"resolution": "money"}).get_json()
        client.delete("/retur/1/delete")

        response = client.post("/retur/undo")
        assert response.status_code == 200
        assert response.get_json() == approved
        assert client.get("/retur").get_json() == [approved]

    def test_undo_status(self, client):
        _create(client)
        _create(client)
        assert client.get("/retur/undo").get_json() == {"can_undo": False, "depth": 0, "next_id": 3}
        client.delete("/retur/2/delete")
        assert client.get("/retur/undo").get_json() == {"can_undo": True, "depth": 1, "next_id": 2}

    def test_create_after_undo_succeeds(self, client):
        _create(client, "laptop")
        client.delete("/retur/1/delete")
        client.post("/retur/undo")

        statuses = [_create(client, f"item{n}").status_code for n in range(3)]
        assert statuses == [201, 201, 201]
        assert [r["id"] for r in client.get("/retur").get_json()] == [1, 2, 3, 4]
        assert client.get("/retur/undo").get_json()["next_id"] == 5

    def test_undo_after_id_reuse_reports_collision(self, client):
        _create(client, "laptop")
        client.delete("/retur/1/delete")
        assert _create(client, "tablet").get_json()["id"] == 1

        response = client.post("/retur/undo")
        assert response.status_code == 500
        assert response.get_json() == {"error": "Return ID 1 is already in use"}
        assert client.get("/retur").get_json()[0]["item"] == "tablet"


class TestScenario:
    def test_id_reuse_walkthrough(self, client):
        laptop = _create(client, "laptop", "damaged").get_json()
        assert (laptop["id"], laptop["status"]) == (1, "Pending")
        phone = _create(client, "phone", "damaged").get_json()
        assert phone["id"] == 2

        client.delete("/retur/1/delete")
        assert client.get("/retur/undo").get_json()["next_id"] == 1

        tablet = _create(client, "tablet", "scratch").get_json()
        assert tablet["id"] == 1
        assert phone in client.get("/retur").get_json()

    def test_lifo_reuse(self, client):
        for n in range(5):
            _create(client, f"item{n}")
        client.delete("/retur/5/delete")
        client.delete("/retur/3/delete")
        assert _create(client, "new").get_json()["id"] == 3
