COUPON = {"code": "SAVE10", "expiryDate": "2025-12-31", "description": "10% off", "discount": 10}


def test_coupon_round_trip(client, admin_headers):
    created = client.post("/coupons", json=COUPON, headers=admin_headers)
    assert created.status_code == 201
    assert created.json()["couponId"]

    resp = client.get("/coupons/SAVE10")

    assert resp.status_code == 200
    coupon = resp.json()["coupon"]
    for field, value in COUPON.items():
        assert coupon[field] == value


def test_coupon_writes_require_admin(client):
    assert client.post("/coupons", json=COUPON).status_code == 401


def test_coupon_requires_all_fields(client, admin_headers):
    resp = client.post("/coupons", json={"code": "SAVE10"}, headers=admin_headers)

    assert resp.status_code == 400


def test_unknown_coupon_code(client):
    resp = client.get("/coupons/NOPE")

    assert resp.status_code == 404
    assert resp.json()["message"] == "Coupon not found"


def test_coupon_update_and_delete(client, admin_headers):
    coupon_id = client.post("/coupons", json=COUPON, headers=admin_headers).json()["couponId"]

    updated = client.put(
        f"/coupons/{coupon_id}",
        json={**COUPON, "code": "SAVE20", "discount": 20},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["coupon"]["discount"] == 20
    assert client.get("/coupons/SAVE20").status_code == 200

    assert client.delete(f"/coupons/{coupon_id}", headers=admin_headers).status_code == 200
    assert client.get("/coupons").json() == {"success": True, "coupons": []}


def test_coupon_update_and_delete_missing(client, admin_headers):
    assert client.put("/coupons/999", json=COUPON, headers=admin_headers).status_code == 404
    assert client.delete("/coupons/999", headers=admin_headers).status_code == 404
    assert client.delete("/coupons/not-an-id", headers=admin_headers).status_code == 400
