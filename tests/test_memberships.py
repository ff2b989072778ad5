from datetime import datetime, timedelta


def test_second_product_without_membership_is_forbidden(submit_product):
    assert submit_product(name="First").status_code == 201

    resp = submit_product(name="Second")

    assert resp.status_code == 403
    assert "membership" in resp.json()["message"]


def test_active_membership_lifts_product_limit(client, submit_product):
    client.post("/memberships", json={"userEmail": "maker@test.local"})

    assert submit_product(name="First").status_code == 201
    assert submit_product(name="Second").status_code == 201
    assert submit_product(name="Third").status_code == 201


def test_inactive_membership_does_not_lift_limit(client, submit_product):
    client.post("/memberships", json={"userEmail": "maker@test.local", "isActive": False})

    assert submit_product(name="First").status_code == 201
    assert submit_product(name="Second").status_code == 403


def test_membership_gate_is_per_owner(submit_product):
    assert submit_product(owner_email="a@test.local").status_code == 201
    assert submit_product(owner_email="b@test.local").status_code == 201


def test_membership_expires_thirty_days_after_purchase(client):
    resp = client.post("/memberships", json={"userEmail": "m@test.local"})

    assert resp.status_code == 201
    membership = resp.json()["membership"]
    purchased = datetime.fromisoformat(membership["purchasedAt"])
    expires = datetime.fromisoformat(membership["expiresAt"])
    assert expires - purchased == timedelta(days=30)
    assert membership["isActive"] is True
    assert resp.json()["membershipId"] == membership["_id"]


def test_membership_crud(client):
    membership_id = client.post("/memberships", json={"userEmail": "m@test.local"}).json()["membershipId"]

    assert [m["_id"] for m in client.get("/memberships").json()] == [membership_id]
    assert client.get(f"/memberships/{membership_id}").json()["userEmail"] == "m@test.local"

    status = client.get("/memberships/status/m@test.local").json()
    assert status["isMember"] is True

    assert client.delete(f"/memberships/{membership_id}").status_code == 200
    assert client.get(f"/memberships/{membership_id}").status_code == 404
    assert client.delete(f"/memberships/{membership_id}").status_code == 404
    assert client.get("/memberships/status/m@test.local").json() == {
        "email": "m@test.local",
        "isMember": False,
        "membership": None,
    }


def test_membership_malformed_id(client):
    assert client.get("/memberships/abc").status_code == 400
