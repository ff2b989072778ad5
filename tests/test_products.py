import base64


def test_submit_product_stores_base64_image_and_defaults(submit_product):
    resp = submit_product(image=b"\x89PNG-bytes")

    assert resp.status_code == 201
    product = resp.json()["product"]
    assert product["productName"] == "Widget"
    assert base64.b64decode(product["productImage"]) == b"\x89PNG-bytes"
    assert product["tags"] == ["ai", "tools"]
    assert product["status"] == "pending"
    assert product["votes"] == 0
    assert product["votedBy"] == []
    assert product["reportCount"] == 0
    assert product["timestamp"]


def test_submit_product_accepts_comma_separated_tags(submit_product):
    resp = submit_product(tags="ai, tools,ai ,")

    assert resp.status_code == 201
    assert resp.json()["product"]["tags"] == ["ai", "tools"]


def test_submit_product_rejects_malformed_tags(submit_product):
    resp = submit_product(tags='["ai"')

    assert resp.status_code == 400


def test_submit_product_rejects_non_string_tags(submit_product):
    resp = submit_product(tags='[null, 1]')

    assert resp.status_code == 400
    assert resp.json()["message"] == "tags must be a JSON list of strings"


def test_submit_product_requires_name(client):
    resp = client.post("/products", data={"ownerEmail": "maker@test.local"})

    assert resp.status_code == 400


def test_get_product(client, product_id):
    resp = client.get(f"/products/{product_id}")

    assert resp.status_code == 200
    assert resp.json()["_id"] == product_id


def test_get_product_malformed_and_missing_id(client):
    assert client.get("/products/not-an-id").status_code == 400

    resp = client.get("/products/424242")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Product not found"


def test_list_products_paginates(client, submit_product):
    client.post("/memberships", json={"userEmail": "maker@test.local"})
    for i in range(3):
        assert submit_product(name=f"P{i}").status_code == 201

    first = client.get("/products", params={"page": 1, "limit": 2}).json()
    second = client.get("/products", params={"page": 2, "limit": 2}).json()

    assert first["total"] == 3
    assert first["limit"] == 2
    assert len(first["products"]) == 2
    assert len(second["products"]) == 1
    names = {p["productName"] for p in first["products"] + second["products"]}
    assert names == {"P0", "P1", "P2"}


def test_list_products_filters_by_tag_and_search(client, submit_product):
    client.post("/memberships", json={"userEmail": "maker@test.local"})
    submit_product(name="Alpha", tags='["ai"]')
    submit_product(name="Beta", tags='["design"]')

    by_tag = client.get("/products", params={"tag": "design"}).json()["products"]
    by_search = client.get("/products", params={"search": "alp"}).json()["products"]

    assert [p["productName"] for p in by_tag] == ["Beta"]
    assert [p["productName"] for p in by_search] == ["Alpha"]


def test_tag_filter_matches_whole_tags_only(client, submit_product):
    client.post("/memberships", json={"userEmail": "maker@test.local"})
    submit_product(name="Cafe", tags='["café"]')
    submit_product(name="Under", tags='["a_b"]')
    submit_product(name="Wild", tags='["axb"]')
    submit_product(name="Longer", tags='["a_bc"]')

    def names(tag):
        return [p["productName"] for p in client.get("/products", params={"tag": tag}).json()["products"]]

    assert names("café") == ["Cafe"]
    assert names("a_b") == ["Under"]
    assert names("a%") == []


def test_delete_product(client, product_id):
    resp = client.delete(f"/products/{product_id}")

    assert resp.status_code == 200
    assert client.get(f"/products/{product_id}").status_code == 404


def test_delete_missing_product_is_not_found(client):
    resp = client.delete("/products/999")

    assert resp.status_code == 404
    assert resp.json()["message"] == "Product not found to delete"


def test_my_products(client, submit_product):
    submit_product(owner_email="a@test.local", name="A")
    submit_product(owner_email="b@test.local", name="B")

    resp = client.get("/myproducts", params={"email": "a@test.local"})

    assert [p["productName"] for p in resp.json()] == ["A"]


def test_status_update_requires_admin(client, product_id):
    resp = client.patch(f"/products/{product_id}/status", json={"status": "accepted"})

    assert resp.status_code == 401


def test_status_update_accepts_known_values(client, product_id, admin_headers):
    resp = client.patch(f"/products/{product_id}/status", json={"status": "accepted"}, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json()["product"]["status"] == "accepted"

    resp = client.patch(f"/products/approve/{product_id}", json={"status": "rejected"}, headers=admin_headers)
    assert resp.json()["product"]["status"] == "rejected"


def test_status_update_rejects_unknown_values(client, product_id, admin_headers):
    resp = client.patch(f"/products/{product_id}/status", json={"status": "Approved"}, headers=admin_headers)

    assert resp.status_code == 400
    assert client.get(f"/products/{product_id}").json()["status"] == "pending"


def test_status_update_missing_product(client, admin_headers):
    resp = client.patch("/products/999/status", json={"status": "accepted"}, headers=admin_headers)

    assert resp.status_code == 404


def test_featured_lists_only_accepted(client, product_id, admin_headers):
    client.patch(f"/products/{product_id}/featured", json={"featured": True}, headers=admin_headers)
    assert client.get("/products/featured").json()["featuredProducts"] == []

    client.patch(f"/products/{product_id}/status", json={"status": "accepted"}, headers=admin_headers)
    featured = client.get("/products/featured").json()["featuredProducts"]

    assert [p["_id"] for p in featured] == [product_id]
