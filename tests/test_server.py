"""Tests for the HTTP service."""

import asyncio
import importlib

import pytest
from fastapi.testclient import TestClient

from cypoints.adapter import generate_calabi_yau
from cypoints.adapter import handle_request as real_handle_request
from cypoints.server import app

# the package re-exports the FastAPI instance under the module name
server_app = importlib.import_module("cypoints.server.app")


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_matches_plugin_bytes(client):
    response = client.post("/api/generate", content=b"2,0.5,4")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.content == generate_calabi_yau(b"2,0.5,4")
    assert len(response.text.split(",")) == 302


def test_generate_error_text(client):
    response = client.post("/api/generate", content=b"2,0.5")
    assert response.status_code == 200
    assert response.text == "Error: expected 3 parameters (n,alpha,subdivisions)"


def test_surface_json(client):
    response = client.get("/api/surface", params={"n": 2, "alpha": 0.5, "subdivisions": 1})
    assert response.status_code == 200
    data = response.json()
    assert data["request"] == {"n": 2, "alpha": 0.5, "subdivisions": 1}
    assert data["point_count"] == 16
    assert len(data["points"]) == 16
    zs = [p[2] for p in data["points"]]
    assert data["z_min"] == min(zs)
    assert data["z_max"] == max(zs)


def test_surface_bad_request(client):
    response = client.get("/api/surface", params={"n": "x", "alpha": 0.5, "subdivisions": 1})
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["code"] == "R003"
    assert detail["field"] == "n"


def test_surface_zero_order(client):
    response = client.get("/api/surface", params={"n": 0, "alpha": 0.5, "subdivisions": 1})
    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "nonpositive_n"


def _record_loop(calls):
    def handler(data):
        try:
            asyncio.get_running_loop()
            calls.append("event loop")
        except RuntimeError:
            calls.append("worker thread")
        return real_handle_request(data)
    return handler


def test_generate_runs_off_event_loop(client, monkeypatch):
    calls = []
    monkeypatch.setattr(server_app, "handle_request", _record_loop(calls))
    response = client.post("/api/generate", content=b"1,0.5,1")
    assert response.status_code == 200
    assert calls == ["worker thread"]


def test_surface_runs_off_event_loop(client, monkeypatch):
    calls = []
    monkeypatch.setattr(server_app, "handle_request", _record_loop(calls))
    response = client.get("/api/surface", params={"n": 1, "alpha": 0.5, "subdivisions": 1})
    assert response.status_code == 200
    assert calls == ["worker thread"]


def test_generate_oversized_field_is_error_text(client):
    response = client.post("/api/generate", content=("1" * 5000 + ",0.5,1").encode())
    assert response.status_code == 200
    assert response.text == "Error: invalid n"
