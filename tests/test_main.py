"""Tests for the HTML and JSON job listing routes."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from jobboard.config import Settings
from jobboard.engine import search_engine
from jobboard.main import create_app

# --- Test Setup ---


@pytest.fixture
def jobs(jobs_factory) -> list:
    return jobs_factory(25)


@pytest.fixture
def loader_calls(monkeypatch: pytest.MonkeyPatch, jobs: list) -> list:
    """Serve a fixed job list instead of calling the remote APIs."""
    calls: list = []

    def fake_get_jobs(settings):
        calls.append(settings)
        return jobs

    monkeypatch.setattr(search_engine, "get_jobs", fake_get_jobs)
    return calls


@pytest.fixture
def app(loader_calls: list) -> FastAPI:
    return create_app(Settings(page_size=10))


@pytest.fixture
def client(app: FastAPI):
    with TestClient(app) as client:
        yield client


# --- Startup ---


def test_jobs_loaded_before_first_request(app: FastAPI, loader_calls: list) -> None:
    with TestClient(app):
        assert len(loader_calls) == 1


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "jobs_loaded": 25}


# --- HTML listing ---


class TestIndexPage:
    def test_first_page(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        body = response.text
        assert "Job 0<" in body
        assert "Job 9<" in body
        assert "Job 10<" not in body
        assert "Page 1 of 3" in body
        assert 'class="prev"' not in body
        assert 'href="/?page=2"' in body

    def test_middle_page_links_both_ways(self, client: TestClient) -> None:
        body = client.get("/?page=2").text
        assert "Job 10<" in body
        assert "Job 19<" in body
        assert 'href="/?page=1"' in body
        assert 'href="/?page=3"' in body

    def test_last_page(self, client: TestClient) -> None:
        body = client.get("/", params={"page": "3"}).text
        assert "Job 24<" in body
        assert "Page 3 of 3" in body
        assert 'href="/?page=2"' in body
        assert 'class="next"' not in body

    def test_page_past_the_end_renders_empty(self, client: TestClient) -> None:
        response = client.get("/?page=9")
        assert response.status_code == 200
        assert "No jobs on this page." in response.text
        assert 'href="/?page=8"' in response.text
        assert 'class="next"' not in response.text

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", ""])
    def test_invalid_page_shows_first_page(self, client: TestClient, raw: str) -> None:
        response = client.get("/", params={"page": raw})
        assert response.status_code == 200
        assert "Page 1 of 3" in response.text
        assert "Job 0<" in response.text

    def test_titles_are_escaped(self, client: TestClient, jobs: list) -> None:
        jobs[0]["title"] = "<script>alert(1)</script>"
        body = client.get("/").text
        assert "<script>alert(1)</script>" not in body
        assert "&lt;script&gt;" in body

    def test_non_http_link_not_rendered(self, client: TestClient, jobs: list) -> None:
        jobs[0]["url"] = "javascript:alert(1)"
        body = client.get("/").text
        assert "javascript:" not in body
        assert "Job 0</div>" in body
        assert 'href="https://example.com/jobs/1"' in body


# --- JSON listing ---


class TestJobsApi:
    def test_page_payload(self, client: TestClient) -> None:
        data = client.get("/api/jobs?page=3").json()

        assert data["page"] == 3
        assert data["page_count"] == 3
        assert data["page_size"] == 10
        assert data["total"] == 25
        assert data["has_prev"] is True
        assert data["has_next"] is False
        assert [j["title"] for j in data["items"]] == [f"Job {i}" for i in range(20, 25)]

    def test_defaults_to_first_page(self, client: TestClient) -> None:
        data = client.get("/api/jobs?page=banana").json()
        assert data["page"] == 1
        assert len(data["items"]) == 10

    def test_empty_job_list(self, client: TestClient, jobs: list) -> None:
        jobs.clear()
        data = client.get("/api/jobs").json()
        assert data == {
            "items": [],
            "page": 1,
            "page_count": 0,
            "page_size": 10,
            "total": 0,
            "has_prev": False,
            "has_next": False,
        }
