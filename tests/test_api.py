import pytest
from fastapi.testclient import TestClient
from app.app import app
from discovery.models import Dataset, Faculty
from etl.public_data import DatasetFetchError, default_context


@pytest.fixture
def client(monkeypatch):
    """FastAPI test client; the remote dataset is unreachable so the fallback is served."""
    def unreachable(url, **kwargs):
        raise DatasetFetchError(f"Could not load dataset from {url}: unreachable")

    monkeypatch.setattr("etl.public_data.fetch_dataset", unreachable)
    with TestClient(app) as c:
        yield c


class TestQueryEndpoint:
    """Test POST /query endpoint."""

    def test_query_requires_q_parameter(self, client):
        response = client.post("/query", json={})
        assert response.status_code == 422

    def test_query_rejects_empty_query(self, client):
        assert client.post("/query", json={"q": ""}).status_code == 400
        assert client.post("/query", json={"q": "   "}).status_code == 400

    def test_query_rejects_overlong_query(self, client):
        response = client.post("/query", json={"q": "a " * 10000})
        assert response.status_code == 400

    def test_query_rejects_unknown_type(self, client):
        response = client.post("/query", json={"q": "innovation", "types": ["course"]})
        assert response.status_code == 422

    def test_response_format(self, client):
        response = client.post("/query", json={"q": "cybersecurity"})
        assert response.status_code == 200

        data = response.json()
        assert data["query"] == "cybersecurity"
        assert data["total"] == 1

        result = data["results"][0]
        assert result["type"] == "faculty"
        assert result["confidence"] == 45
        assert result["label"] == "Moderate Match"
        assert result["matchedKeywords"] == ["cybersecurity"]
        assert result["aiJustification"]
        assert result["data"]["name"] == "Dr. Sarah Johnson"
        assert "researchInterests" in result["data"]

    def test_short_terms_return_nothing(self, client):
        data = client.post("/query", json={"q": "ai of to"}).json()
        assert data == {"query": "ai of to", "total": 0, "results": []}

    def test_type_filter(self, client):
        data = client.post("/query", json={"q": "machine learning", "types": ["patent"]}).json()
        assert [r["type"] for r in data["results"]] == ["patent"]
        assert data["results"][0]["data"]["patentNumber"] == "US10234567B2"
        assert data["results"][0]["confidence"] == 90
        assert data["results"][0]["label"] == "High Match"

    def test_top_k_truncates_but_reports_total(self, client):
        data = client.post("/query", json={"q": "innovation", "top_k": 1}).json()
        assert data["total"] == 3
        assert len(data["results"]) == 1
        assert data["results"][0]["type"] == "faculty"

    def test_tie_order(self, client):
        data = client.post("/query", json={"q": "innovation"}).json()
        assert [r["type"] for r in data["results"]] == ["faculty", "paper", "project"]
        assert {r["confidence"] for r in data["results"]} == {45}

    def test_scores_sorted_and_in_range(self, client):
        data = client.post("/query", json={"q": "machine learning data analytics climate"}).json()
        scores = [r["confidence"] for r in data["results"]]
        assert scores == sorted(scores, reverse=True)
        assert all(0 < s <= 100 for s in scores)


class TestDatasetEndpoints:

    def test_dataset_counts(self, client):
        response = client.get("/dataset")
        assert response.status_code == 200
        assert response.json() == {"faculty": 3, "papers": 3, "patents": 2, "projects": 3}

    def test_reload_falls_back(self, client):
        response = client.post("/dataset/reload")
        assert response.status_code == 200
        assert response.json()["faculty"] == 3

    def test_failed_reload_keeps_live_dataset(self, client, monkeypatch):
        live = Dataset(faculty=[Faculty(id="f1", name="Ada", ai_keywords=["robotics"])])
        monkeypatch.setattr(default_context, "_dataset", live)

        response = client.post("/dataset/reload")
        assert response.json() == {"faculty": 1, "papers": 0, "patents": 0, "projects": 0}
        assert client.post("/query", json={"q": "robotics"}).json()["total"] == 1


class TestNetworkEndpoints:

    def test_colleagues(self, client):
        response = client.get("/faculty/1/colleagues")
        assert response.status_code == 200
        matches = response.json()
        assert [m["id"] for m in matches] == ["2", "3"]
        assert matches[0]["label"] == "Potential Match"

    def test_projects(self, client):
        response = client.get("/faculty/1/projects")
        assert response.status_code == 200
        assert response.json()[0]["id"] == "r1"

    def test_unknown_faculty(self, client):
        assert client.get("/faculty/999/colleagues").status_code == 404
        assert client.get("/faculty/999/projects").status_code == 404
