"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from patiokit.api.main import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_build_freestanding(client: TestClient) -> None:
    response = client.post("/api/build", json={"config": {"style": "free-standing"}})

    assert response.status_code == 200
    body = response.json()
    assert body["stats"]["posts"] == 6
    assert body["summary"]["patio_type"] == "Type 1"
    assert len(body["layout"]["post_positions"]) == 6
    assert body["parts"][0]["id"] == "ground-0"


def test_build_clamps_dimensions(client: TestClient) -> None:
    response = client.post("/api/build", json={"config": {"width": 40, "depth": 0.5}})

    body = response.json()
    assert body["validated_config"]["width"] == 12
    assert body["validated_config"]["depth"] == 2


def test_build_empty_body_uses_defaults(client: TestClient) -> None:
    response = client.post("/api/build", json={})

    assert response.status_code == 200
    assert response.json()["summary"]["posts"] == 3


def test_invalid_style_rejected(client: TestClient) -> None:
    response = client.post("/api/build", json={"config": {"style": "pergola"}})

    assert response.status_code == 422


def test_front_attachment_rejected(client: TestClient) -> None:
    response = client.post("/api/build", json={"config": {"attached_sides": ["front"]}})

    assert response.status_code == 422


def test_quote(client: TestClient) -> None:
    response = client.post("/api/quote", json={})

    quote = response.json()["quote"]
    assert quote["total"] == 7630
    assert quote["posts"] == 3


def test_scene_without_site(client: TestClient) -> None:
    response = client.post("/api/scene", json={"include_site": False})

    assert response.status_code == 200
    scene = response.json()
    kinds = {node["kind"] for node in scene["nodes"]}
    assert "ground" not in kinds
    assert "wall" not in kinds
    assert all(node["material"] in scene["materials"] for node in scene["nodes"])


def test_catalog(client: TestClient) -> None:
    body = client.get("/api/catalog").json()

    assert body["default"] == "stratco-outback"
    assert "stratco-outback" in [c["catalog_id"] for c in body["catalogs"]]
    assert body["frame_colors"]["Monument"] == "#2d2c2b"
    assert body["decking_materials"]["spotted-gum"]["name"] == "Spotted Gum"
    assert body["decking_colors"]["composite"]["Walnut"] == "#5c3d2e"


def test_deck_build(client: TestClient) -> None:
    response = client.post("/api/deck/build", json={"config": {"length": 40, "height": 0.9}})

    assert response.status_code == 200
    body = response.json()
    assert body["validated_config"]["length"] == 12
    assert body["stats"]["posts"] == len(body["layout"]["post_positions"])
    assert body["parts"][0]["id"] == "ground-0"


def test_deck_quote(client: TestClient) -> None:
    body = client.post("/api/deck/quote", json={}).json()

    assert body["quote"]["total"] == 4927
    assert body["quote"]["breakdown"][3]["label"] == "Posts (×12)"


def test_deck_scene_glass_is_transparent(client: TestClient) -> None:
    scene = client.post(
        "/api/deck/scene",
        json={"config": {"railing_style": "glass"}, "include_site": False},
    ).json()

    panels = [n for n in scene["nodes"] if n["kind"] == "glass-panel"]
    assert len(panels) == 3
    assert scene["materials"][panels[0]["material"]]["transparent"] is True
    assert all(n["kind"] != "ground" for n in scene["nodes"])


def test_deck_rules(client: TestClient) -> None:
    rules = client.get("/api/deck/rules").json()

    assert {"id": "deck.boards", "name": "Deck Boards"} in rules


def test_rules(client: TestClient) -> None:
    rules = client.get("/api/rules").json()

    assert len(rules) == 15
    assert {"id": "roof.gable", "name": "Gable Roof"} in rules
