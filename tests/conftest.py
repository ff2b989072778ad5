import pytest
from fastapi.testclient import TestClient

from producthunt.config import Settings
from producthunt.main import create_app

ADMIN_EMAIL = "admin@test.local"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        SECRET_KEY="test-secret",
        DEFAULT_ADMIN_EMAIL=ADMIN_EMAIL,
        DEFAULT_ADMIN_PASSWORD=ADMIN_PASSWORD,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def admin_headers(client):
    resp = client.post("/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def submit_product(client):
    """Submit a product through the multipart endpoint and return the response."""

    def _submit(owner_email="maker@test.local", name="Widget", tags='["ai", "tools"]', image=b"fake-png"):
        files = {"productImage": ("logo.png", image, "image/png")} if image is not None else None
        return client.post(
            "/products",
            data={
                "productName": name,
                "description": f"{name} description",
                "tags": tags,
                "externalLinks": "https://example.com",
                "ownerName": "Maker",
                "ownerEmail": owner_email,
            },
            files=files,
        )

    return _submit


@pytest.fixture
def product_id(submit_product):
    resp = submit_product()
    assert resp.status_code == 201
    return resp.json()["product"]["_id"]
