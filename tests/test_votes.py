import pytest

from producthunt.domain.models.product import Product
from producthunt.infrastructure.repositories.product_repository import SQLAlchemyProductRepository


def test_upvote_counts_once_per_voter(client, product_id):
    first = client.patch(f"/products/{product_id}/upvote", json={"userId": "voter-1"})
    second = client.patch(f"/products/{product_id}/upvote", json={"userId": "voter-1"})

    assert first.status_code == 200
    assert first.json() == {"success": True, "updatedVotes": 1}
    assert second.status_code == 409
    assert second.json()["message"] == "Already voted"

    product = client.get(f"/products/{product_id}").json()
    assert product["votes"] == 1
    assert product["votedBy"] == ["voter-1"]


def test_upvote_distinct_voters_accumulate(client, product_id):
    for n in range(3):
        resp = client.patch(f"/products/{product_id}/upvote", json={"userId": f"voter-{n}"})
        assert resp.json()["updatedVotes"] == n + 1

    product = client.get(f"/products/{product_id}").json()
    assert product["votes"] == 3
    assert sorted(product["votedBy"]) == ["voter-0", "voter-1", "voter-2"]


def test_upvote_missing_product(client):
    resp = client.patch("/products/999/upvote", json={"userId": "voter-1"})

    assert resp.status_code == 404


def test_upvote_requires_voter(client, product_id):
    resp = client.patch(f"/products/{product_id}/upvote", json={})

    assert resp.status_code == 400


@pytest.fixture
def repo(client):
    db = client.app.state.database.session()
    yield SQLAlchemyProductRepository(db, Product)
    db.close()


def test_repository_add_vote_is_idempotent(repo, product_id):
    assert repo.add_vote(product_id, "voter-1") == 1
    assert repo.add_vote(product_id, "voter-1") is None
    assert repo.add_vote(product_id, "voter-2") == 2

    product = repo.get_by_id(product_id)
    assert product.votes == 2
    assert product.voted_by == ["voter-1", "voter-2"]


def test_rising_returns_products_with_ten_or_more_votes(client, submit_product):
    client.post("/memberships", json={"userEmail": "maker@test.local"})
    ids = {}
    for name, votes in (("cold", 9), ("warm", 10), ("hot", 12)):
        pid = submit_product(name=name).json()["product"]["_id"]
        ids[name] = pid
        for n in range(votes):
            client.patch(f"/products/{pid}/upvote", json={"userId": f"{name}-{n}"})

    rising = client.get("/products/rising").json()["risingProducts"]
    rising_ids = [p["_id"] for p in rising]

    assert sorted(rising_ids) == sorted([ids["warm"], ids["hot"]])
    assert len(rising_ids) == len(set(rising_ids))
    assert all(p["votes"] >= 10 for p in rising)
