import pytest
from fastapi.testclient import TestClient

from chunkwise.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_profiles(client):
    body = client.get("/profiles").json()
    assert body["active"] == "default"
    assert body["profiles"]["default"]["strategy"] == "recursive_character"


def test_split_with_overrides(client):
    response = client.post(
        "/split",
        json={
            "documents": [{"text": "Hello world. This is a test of splitting.", "metadata": {"source": "a"}}],
            "chunk_size": 20,
            "chunk_overlap": 5,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["strategy"] == "recursive_character"
    assert body["total_chunks"] == 3
    assert [c["text"] for c in body["chunks"]] == ["Hello world", "This is a test of", "of splitting."]
    assert all(c["metadata"] == {"source": "a"} for c in body["chunks"])
    assert all(c["id"].startswith("chunk_") for c in body["chunks"])
    assert body["warnings"] == []


def test_split_without_ids(client):
    response = client.post("/split", json={"documents": [{"text": "tiny"}], "with_ids": False})

    assert response.status_code == 200
    assert response.json()["chunks"] == [{"id": None, "text": "tiny", "metadata": {}}]


def test_split_with_regex_profile(client):
    response = client.post(
        "/split",
        json={"documents": [{"text": "one\n\ntwo\n \nthree"}], "profile": "paragraphs"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["strategy"] == "regex_delimiter"
    assert [c["text"] for c in body["chunks"]] == ["one", "two", "three"]


def test_overlap_not_smaller_than_size_is_rejected(client):
    response = client.post(
        "/split",
        json={"documents": [{"text": "some text"}], "chunk_size": 10, "chunk_overlap": 10},
    )
    assert response.status_code == 422


def test_unknown_profile_is_rejected(client):
    response = client.post("/split", json={"documents": [{"text": "x"}], "profile": "nope"})
    assert response.status_code == 422
    assert "Unknown splitter profile" in response.json()["detail"]


def test_unsupported_metadata_is_rejected(client):
    response = client.post("/split", json={"documents": [{"text": "x", "metadata": {"flag": True}}]})
    assert response.status_code == 422


def test_document_too_large_is_rejected(client, monkeypatch):
    monkeypatch.setenv("MAX_DOCUMENT_LENGTH", "5")
    response = client.post("/split", json={"documents": [{"text": "more than five"}]})
    assert response.status_code == 422
