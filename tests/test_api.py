"""
Integration tests for the Crosswords API.
Requires server running with the WordNet dataset: crosswords serve --port 8000
"""

import pytest
import httpx

BASE_URL = "http://localhost:8000/api"


def _server_ready() -> bool:
    try:
        return httpx.get("http://localhost:8000/health", timeout=2).json().get("ready", False)
    except (httpx.HTTPError, ValueError):
        return False


pytestmark = pytest.mark.skipif(not _server_ready(), reason="no Crosswords server on localhost:8000")


@pytest.fixture
def client():
    return httpx.Client(base_url=BASE_URL, timeout=120)


class TestWords:
    def test_shark(self, client):
        r = client.get("/words/shark")
        assert r.status_code == 200
        words = r.json()
        assert "shark" in words
        assert len(words) == len(set(words))

    def test_shark_verbose(self, client):
        r = client.get("/words/verbose/shark", params={"recurse": 1})
        assert r.status_code == 200
        assert all(e["relation"] == "" for e in r.json())

    def test_length_filter(self, client):
        r = client.get("/words/shark", params={"recurse": 3, "length": 4})
        assert r.status_code == 200
        assert all(len(w) == 4 for w in r.json())

    def test_not_found(self, client):
        assert client.get("/words/qqqqzzzz").status_code == 404

    def test_invalid_depth(self, client):
        r = client.get("/words/shark", params={"recurse": 6})
        assert r.status_code == 400
