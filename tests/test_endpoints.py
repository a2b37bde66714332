from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from devops_demo.core.config import Settings, load_settings
from devops_demo.main import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(Settings()))


def test_health_returns_ok(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/json"
    assert r.content == b'{"status":"OK","service":"devops-demo"}'


def test_version_reports_default(client: TestClient) -> None:
    r = client.get("/version")
    assert r.status_code == 200
    assert r.content == b'{"service":"devops-demo","version":"v1.0.0"}'


def test_version_reports_app_version_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("APP_VERSION", "v2.3.1")
    client = TestClient(create_app(load_settings()))

    r = client.get("/version")
    assert r.status_code == 200
    assert r.json() == {"service": "devops-demo", "version": "v2.3.1"}


def test_error_is_canned_500(client: TestClient) -> None:
    r = client.get("/error")
    assert r.status_code == 500
    assert r.content == b'{"message":"Intentional error for testing"}'


@pytest.mark.parametrize("path", ["/health", "/version", "/error"])
def test_query_and_headers_do_not_change_response(client: TestClient, path: str) -> None:
    plain = client.get(path)
    noisy = client.get(
        path,
        params={"verbose": "1", "version": "v9"},
        headers={"Accept": "text/html", "X-Request-Id": "abc123"},
    )
    assert noisy.status_code == plain.status_code
    assert noisy.content == plain.content


@pytest.mark.parametrize("path", ["/health", "/version", "/error"])
def test_repeated_requests_are_byte_identical(client: TestClient, path: str) -> None:
    bodies = {client.get(path).content for _ in range(5)}
    assert len(bodies) == 1


@pytest.mark.parametrize("path", ["/", "/healthz", "/health/extra", "/api/version"])
def test_undefined_paths_are_404(client: TestClient, path: str) -> None:
    assert client.get(path).status_code == 404
    assert client.post(path).status_code == 404


@pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
def test_generated_docs_are_disabled(client: TestClient, path: str) -> None:
    assert client.get(path).status_code == 404


def test_wrong_method_on_known_route_is_client_error(client: TestClient) -> None:
    r = client.post("/health")
    assert r.status_code == 405


def test_module_app_serves_health() -> None:
    from devops_demo.main import app

    r = TestClient(app).get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "OK", "service": "devops-demo"}
