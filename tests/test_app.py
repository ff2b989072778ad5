def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    assert client.get("/health").json() == {"status": "healthy"}


def test_request_id_header_is_echoed(client):
    resp = client.get("/health", headers={"X-Request-ID": "4b7f3a52c1d84e0e9f8a2b6c3d1e5f70"})

    assert resp.headers["X-Request-ID"] == "4b7f3a52c1d84e0e9f8a2b6c3d1e5f70"


def test_error_envelope(client):
    resp = client.get("/products/12345")

    body = resp.json()
    assert body["message"] == body["error"]["message"]
    assert body["error"]["code"] == "EntityNotFoundException"
    assert body["error"]["path"] == "/products/12345"
    assert body["error"]["details"] == {"id": 12345}


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.json()["message"] == "Not Found"
