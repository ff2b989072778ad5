from producthunt.domain.models.review import Review


def test_create_and_list_reviews(client):
    resp = client.post("/reviews", json={"productId": 7, "reviewerName": "Ada", "body": "Nice", "rating": 4})

    assert resp.status_code == 201
    review = resp.json()["review"]
    assert review["productId"] == 7
    assert review["timestamp"]

    client.post("/reviews", json={"productId": 8, "body": "Meh"})
    assert len(client.get("/reviews").json()) == 2
    assert [r["body"] for r in client.get("/reviews/product/7").json()] == ["Nice"]


def test_review_validation(client):
    assert client.post("/reviews", json={"productId": 7}).status_code == 400
    assert client.post("/reviews", json={"body": "x", "rating": 9}).status_code == 400


def test_list_reviews_returns_every_row(client):
    db = client.app.state.database.session()
    try:
        db.add_all([Review(product_id=1, body=f"review {n}") for n in range(1003)])
        db.commit()
    finally:
        db.close()

    reviews = client.get("/reviews").json()

    assert len(reviews) == 1003
    assert reviews[-1]["body"] == "review 1002"
