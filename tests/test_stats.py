def test_stats_counts_products_by_status(client, submit_product, admin_headers):
    client.post("/memberships", json={"userEmail": "maker@test.local"})
    ids = [submit_product(name=name).json()["product"]["_id"] for name in ("A", "B", "C")]
    client.patch(f"/products/{ids[0]}/status", json={"status": "accepted"}, headers=admin_headers)
    client.patch(f"/products/{ids[1]}/status", json={"status": "rejected"}, headers=admin_headers)
    client.patch(f"/products/{ids[2]}/upvote", json={"userId": "u1"})
    client.patch(f"/products/{ids[2]}/upvote", json={"userId": "u2"})
    client.patch(f"/products/{ids[0]}/upvote", json={"userId": "u1"})

    stats = client.get("/stats").json()

    assert stats["totalProducts"] == 3
    assert stats["totalVotes"] == 3
    assert stats["acceptedProducts"] == 1
    assert stats["rejectedProducts"] == 1
    assert stats["pendingProducts"] == 1
    assert stats["mostVotedProduct"]["_id"] == ids[2]


def test_stats_on_empty_store(client):
    stats = client.get("/stats").json()

    assert stats["totalProducts"] == 0
    assert stats["totalVotes"] == 0
    assert stats["mostVotedProduct"] is None


def test_admin_statistics(client, product_id, admin_headers):
    client.post("/reviews", json={"productId": product_id, "body": "Great", "rating": 5})
    client.post("/reports", json={"productId": product_id, "reporter": "r@test.local"})
    client.post("/memberships", json={"userEmail": "maker@test.local"})

    assert client.get("/admin/statistics").status_code == 401

    stats = client.get("/admin/statistics", headers=admin_headers).json()
    assert stats == {
        "totalProducts": 1,
        "totalAcceptedProducts": 0,
        "totalPendingProducts": 1,
        "totalRejectedProducts": 0,
        "totalReviews": 1,
        "totalUsers": 1,
        "totalReports": 1,
        "totalCoupons": 0,
        "activeMemberships": 1,
    }
