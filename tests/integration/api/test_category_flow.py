"""Integration tests for the category lifecycle over HTTP."""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_documented_example(client):
    """POST, GET, DELETE, GET round trip from the API documentation."""
    created = client.post("/categories", json={"name": "Tools", "description": "Hand tools"})
    assert created.status_code == 201
    assert created.json() == {"id": 1, "name": "Tools", "description": "Hand tools"}

    fetched = client.get("/categories/1")
    assert fetched.status_code == 200
    assert fetched.json() == created.json()

    assert client.delete("/categories/1").status_code == 204
    assert client.get("/categories/1").status_code == 404


def test_list_counts_after_creates_and_deletes(client):
    """N creates and M deletes list exactly N - M entries."""
    ids = [client.post("/categories", json={"name": f"c{i}"}).json()["id"] for i in range(7)]
    for category_id in ids[::3]:
        assert client.delete(f"/categories/{category_id}").status_code == 204

    listed = client.get("/categories").json()

    assert len(listed) == 7 - len(ids[::3])


def test_ids_keep_growing_across_deletes(client):
    """A new category always gets a larger ID than any earlier one."""
    seen = []
    for i in range(4):
        category = client.post("/categories", json={"name": str(i)}).json()
        seen.append(category["id"])
        client.delete(f"/categories/{category['id']}")

    assert seen == sorted(seen)
    assert len(set(seen)) == len(seen)


def test_liveness_and_docs(client):
    root = client.get("/")
    assert root.status_code == 200
    assert root.text == "API is running"

    openapi = client.get("/openapi.json")
    assert openapi.status_code == 200
    assert "/categories/{category_id}" in openapi.json()["paths"]
