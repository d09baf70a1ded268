"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from iconbake.config import Settings
from iconbake.dependencies import get_settings
from iconbake.main import app

client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["commands_registered"] == 10


def test_flatten_circle(circle_svg):
    response = client.post("/api/flatten", json={"svg": circle_svg})
    assert response.status_code == 200
    data = response.json()
    assert data["width"] == 24
    assert data["height"] == 24
    assert len(data["subpaths"]) == 1
    sp = data["subpaths"][0]
    assert sp["closed"] is True
    assert sp["bbox"][0] >= 1.99
    assert sp["bbox"][2] <= 22.01
    # vertices are emitted at increasing angles
    assert sp["winding"] == 1
    assert data["point_count"] == len(sp["points"])
    assert data["warnings"] == []
    assert data["processing_time_ms"] >= 0


def test_flatten_open_path_has_no_winding(smiley_svg):
    response = client.post("/api/flatten", json={"svg": smiley_svg})
    assert response.status_code == 200
    data = response.json()
    assert data["subpaths"][0]["closed"] is False
    assert data["subpaths"][0]["winding"] == 0


def test_flatten_request_overrides(home_svg):
    response = client.post("/api/flatten", json={"svg": home_svg, "size": 48, "upscale": 2, "flatness": 0.1})
    assert response.status_code == 200
    data = response.json()
    assert data["width"] == 96
    assert data["subpaths"][0]["points"][0] == [60, 84]


def test_flatten_reports_warnings():
    response = client.post("/api/flatten", json={"svg": '<svg><path d="M0 0 L5 Q1 1"/></svg>'})
    assert response.status_code == 200
    assert response.json()["warnings"] == ["bad lineto", "bad q"]


def test_flatten_invalid_svg():
    response = client.post("/api/flatten", json={"svg": "<not-svg>"})
    assert response.status_code == 422
    assert response.json()["detail"] == "no <svg> root element"


def test_flatten_rejects_negative_flatness(circle_svg):
    response = client.post("/api/flatten", json={"svg": circle_svg, "flatness": -1})
    assert response.status_code == 422


def test_emit(home_svg):
    response = client.post("/api/emit", json={"svg": home_svg, "name": "house-1"})
    assert response.status_code == 200
    data = response.json()
    assert data["symbol"] == "vg_icon_house_1"
    assert data["subpath_count"] == 2
    assert "bool vg_icon_house_1(vg_shape_t **out, size_t *count) {" in data["source"]
    assert "vg_path_break" not in data["source"]


def test_emit_filled_prefix_groups(filled_ring_svg):
    response = client.post("/api/emit", json={"svg": filled_ring_svg, "name": "ring", "prefix": "vg_icon_f_"})
    assert response.status_code == 200
    assert "vg_path_break" in response.json()["source"]


def test_settings_override(circle_svg):
    app.dependency_overrides[get_settings] = lambda: Settings(iconbake_size=48, iconbake_prefix="my_")
    try:
        flat = client.post("/api/flatten", json={"svg": circle_svg}).json()
        emitted = client.post("/api/emit", json={"svg": circle_svg, "name": "c"}).json()
    finally:
        app.dependency_overrides.clear()
    assert flat["width"] == 48
    assert emitted["symbol"] == "my_c"
