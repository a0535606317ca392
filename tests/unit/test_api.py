"""
Unit tests for the HTTP API.

Uses FastAPI TestClient with explicit Settings, so no environment files or
network are involved. The context manager runs the lifespan hook that builds
the engine.
"""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from docsearch.config import Settings
from docsearch.main import create_app
from docsearch.ranking.scorer import ScoringAlgorithm

pytestmark = pytest.mark.unit


@pytest.fixture
def corpus_file(tmp_path, sample_documents):
    path = tmp_path / "corpus.json"
    path.write_text(json.dumps(sample_documents), encoding="utf-8")
    return path


@pytest.fixture
def client(corpus_file):
    app = create_app(Settings(corpus_path=corpus_file))
    with TestClient(app) as test_client:
        yield test_client


class TestServiceEndpoints:
    """Test root and health endpoints"""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "DocSearch API"
        assert data["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["documents"] == 2
        assert data["terms"] == 6
        assert data["algorithm"] == "tfidf"
        assert data["started_at"].endswith("Z")
        assert data["uptime_seconds"] >= 0

    def test_engine_not_initialized(self, corpus_file):
        """Test 503 when the lifespan hook has not run"""
        client = TestClient(create_app(Settings(corpus_path=corpus_file)))
        response = client.post("/v1/search", json={"query": "fox"})
        assert response.status_code == 503


class TestSearchEndpoint:
    """Test POST /v1/search"""

    def test_single_match(self, client):
        response = client.post("/v1/search", json={"query": "fox"})
        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "fox"
        assert data["algorithm"] == "tfidf"
        assert data["total"] == 1
        assert data["results"][0]["document_id"] == 0
        assert data["results"][0]["content"] == "the quick brown fox"
        assert data["results"][0]["score"] > 0

    def test_no_match(self, client):
        data = client.post("/v1/search", json={"query": "cat"}).json()
        assert data["results"] == []
        assert data["total"] == 0

    def test_empty_query_is_not_an_error(self, client):
        response = client.post("/v1/search", json={"query": ""})
        assert response.status_code == 200
        assert response.json()["total"] == 0

    def test_algorithm_override(self, client):
        data = client.post("/v1/search", json={"query": "the", "algorithm": "BM25"}).json()
        assert data["algorithm"] == "bm25"
        assert [r["document_id"] for r in data["results"]] == [0, 1]
        assert all(r["score"] != 0.0 for r in data["results"])

    def test_top_k(self, client):
        data = client.post("/v1/search", json={"query": "the", "top_k": 1}).json()
        assert data["total"] == 1

    def test_unknown_algorithm(self, client):
        response = client.post("/v1/search", json={"query": "fox", "algorithm": "okapi"})
        assert response.status_code == 400
        assert "Unknown scoring algorithm" in response.json()["detail"]

    @pytest.mark.parametrize("payload", [
        {},
        {"query": "fox", "top_k": 0},
        {"query": "fox", "top_k": 101},
    ])
    def test_invalid_request(self, client, payload):
        response = client.post("/v1/search", json=payload)
        assert response.status_code == 422


class TestDocumentEndpoint:
    """Test GET /v1/documents/{doc_id}"""

    def test_get_document(self, client):
        response = client.get("/v1/documents/1")
        assert response.status_code == 200
        assert response.json() == {"document_id": 1, "content": "the lazy dog", "length": 3}

    def test_unknown_document(self, client):
        response = client.get("/v1/documents/99")
        assert response.status_code == 404
        assert response.json()["detail"] == "Document 99 not found"


class TestDefaultCorpusApp:
    """Test app built with the bundled corpus and BM25 default"""

    def test_bm25_default(self):
        app = create_app(Settings(algorithm=ScoringAlgorithm.BM25))
        with TestClient(app) as client:
            health = client.get("/health").json()
            assert health["documents"] == 31
            assert health["algorithm"] == "bm25"

            data = client.post("/v1/search", json={"query": "the"}).json()
            assert data["algorithm"] == "bm25"
            assert data["total"] == 10


class TestEnvironmentApp:
    """Test app built without explicit settings (uvicorn docsearch.main:app)"""

    @pytest.fixture
    def logging_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr("docsearch.main.load_env_files", lambda: None)
        monkeypatch.setattr("docsearch.main.setup_logging", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_lifespan_configures_logging(self, tmp_path, monkeypatch, logging_calls):
        """Test logging is set up from the environment when the app is served directly"""
        log_file = str(tmp_path / "api.log")
        monkeypatch.setenv("LOG_FILE", log_file)

        with TestClient(create_app()) as client:
            assert client.get("/health").json()["documents"] == 31

        assert logging_calls == [{"log_file": log_file, "console_level": logging.INFO}]

    def test_explicit_settings_leave_logging_alone(self, corpus_file, logging_calls):
        """Test callers passing Settings keep their own logging setup"""
        with TestClient(create_app(Settings(corpus_path=corpus_file))):
            pass

        assert logging_calls == []
