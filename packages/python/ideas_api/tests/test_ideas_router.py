import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ideas_api import reset_workspaces, router
from ideas_api.config import settings
from ideas_api.workspace import get_workspace, resolve_workspace_id


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setattr(settings, "seed_sample_ideas", True)
    monkeypatch.setattr(settings, "default_workspace_id", "test_workspace")
    reset_workspaces()
    app = FastAPI()
    app.include_router(router)
    yield TestClient(app)
    reset_workspaces()


def _root_ids(client):
    return [idea["id"] for idea in client.get("/ideas/tree").json()["ideas"]]


def test_tree_is_seeded(client):
    body = client.get("/ideas/tree").json()
    assert body["revision"] == 0
    assert [idea["id"] for idea in body["ideas"]] == ["1", "2", "3"]


def test_spiral_lists_visible_entries(client):
    body = client.get("/ideas/spiral").json()
    entries = body["entries"]
    assert [entry["id"] for entry in entries] == ["1", "1-1", "1-2", "2", "3"]
    assert [entry["depth"] for entry in entries] == [0, 1, 1, 0, 0]
    assert [entry["draggable"] for entry in entries] == [True, False, False, True, True]
    assert entries[0]["placement"]["stack_order"] > entries[1]["placement"]["stack_order"]
    assert len(body["connectors"]) == len(entries) - 1


def test_toggle_reveals_grandchild(client):
    response = client.post("/ideas/nodes/1-1/toggle")
    assert response.status_code == 200
    assert response.json()["is_expanded"] is True
    ids = [entry["id"] for entry in client.get("/ideas/spiral").json()["entries"]]
    assert ids == ["1", "1-1", "1-1-1", "1-2", "2", "3"]


def test_toggle_missing_returns_404(client):
    assert client.post("/ideas/nodes/nope/toggle").status_code == 404


def test_create_child_expands_parent(client):
    response = client.post("/ideas/nodes/2/children", json={"title": "Fold", "tags": ["a", "a"]})
    assert response.status_code == 201
    body = response.json()
    assert body["revision"] == 1
    assert body["idea"]["depth"] == 1
    assert body["idea"]["tags"] == ["a"]

    parent = client.get("/ideas/nodes/2").json()
    assert parent["is_expanded"] is True
    assert parent["children"][-1]["title"] == "Fold"


def test_create_root_and_blank_title(client):
    assert client.post("/ideas", json={"title": "Spiral"}).status_code == 201
    assert _root_ids(client)[:3] == ["1", "2", "3"]
    assert len(_root_ids(client)) == 4
    assert client.post("/ideas", json={"title": "  "}).status_code == 422


def test_update_keeps_children(client):
    draft = client.get("/ideas/nodes/1/draft").json()
    assert draft["title"] == "The Nature of Recursive Thinking"

    response = client.patch("/ideas/nodes/1", json={**draft, "title": "Recursion"})
    assert response.status_code == 200
    idea = response.json()["idea"]
    assert idea["title"] == "Recursion"
    assert [child["id"] for child in idea["children"]] == ["1-1", "1-2"]
    assert client.patch("/ideas/nodes/ghost", json={"title": "x"}).status_code == 404


def test_reorder_moves_roots(client):
    response = client.post("/ideas/reorder", json={"source_index": 4, "destination_index": 0})
    assert response.status_code == 200
    assert [idea["id"] for idea in response.json()["ideas"]] == ["3", "1", "2"]


def test_reorder_refuses_nested_source(client):
    response = client.post("/ideas/reorder", json={"source_index": 1, "destination_index": 0})
    assert response.status_code == 409
    assert _root_ids(client) == ["1", "2", "3"]


def test_workspaces_are_isolated(client):
    client.post("/ideas", json={"title": "Only here"}, headers={"X-Workspace-Id": "other"})
    assert len(_root_ids(client)) == 3
    assert len(get_workspace("other").snapshot()) == 4


def test_resolve_workspace_id_falls_back_to_default(monkeypatch):
    monkeypatch.setattr(settings, "default_workspace_id", "fallback")
    assert resolve_workspace_id("  team ") == "team"
    assert resolve_workspace_id("   ") == "fallback"
    assert resolve_workspace_id(None) == "fallback"


def test_out_of_range_reorder_keeps_revision(client):
    response = client.post("/ideas/reorder", json={"source_index": 99, "destination_index": 0})
    assert response.status_code == 200
    assert response.json()["revision"] == 0
    assert _root_ids(client) == ["1", "2", "3"]


def test_toggle_on_leaf_keeps_revision(client):
    assert client.post("/ideas/nodes/2/toggle").json()["is_expanded"] is False
    assert client.post("/ideas/nodes/1-2/toggle").status_code == 200
    assert client.get("/ideas/tree").json()["revision"] == 0


def test_same_position_reorder_keeps_revision(client):
    client.post("/ideas/reorder", json={"source_index": 3, "destination_index": 3})
    assert client.get("/ideas/tree").json()["revision"] == 0


def test_unseeded_workspace_starts_empty(client, monkeypatch):
    monkeypatch.setattr(settings, "seed_sample_ideas", False)
    response = client.get("/ideas/tree", headers={"X-Workspace-Id": "blank"})
    assert response.json() == {"revision": 0, "ideas": []}
