"""Tests for the FastAPI routes."""

import pytest
from fastapi.testclient import TestClient

import app as webapp
from bumps_results import analyze_bumps

from conftest import FLAT_CSV, MEN_FINISH


@pytest.fixture
def client(data_dir, monkeypatch):
    monkeypatch.setattr(analyze_bumps, "DATA_DIR", data_dir)
    webapp.dataset_cache.clear()
    yield TestClient(webapp.app)
    webapp.dataset_cache.clear()


class TestDatasets:
    def test_list(self, client):
        response = client.get("/api/datasets")
        assert response.status_code == 200
        assert response.json() == [
            {"filename": "town_2020.csv", "display_name": "Town 2020"},
            {"filename": "town_2020_men.txt", "display_name": "Town 2020 Men"},
        ]

    def test_root_lists_datasets(self, client):
        assert client.get("/").json() == client.get("/api/datasets").json()

    def test_other_files_ignored(self, client, data_dir):
        (data_dir / "notes.md").write_text("not results", encoding="utf-8")
        assert len(client.get("/api/datasets").json()) == 2

    def test_missing_directory(self, client, monkeypatch, tmp_path):
        monkeypatch.setattr(analyze_bumps, "DATA_DIR", tmp_path / "absent")
        assert client.get("/api/datasets").json() == []


class TestEvents:
    def test_summaries(self, client):
        response = client.get("/api/events", params={"dataset": "town_2020.csv"})
        assert response.status_code == 200
        assert [(e["index"], e["gender"], e["crews"]) for e in response.json()] == [
            (0, "M", 6),
            (1, "W", 3),
        ]

    def test_event_payload(self, client):
        response = client.get("/api/event/0", params={"dataset": "town_2020_men.txt"})
        assert response.status_code == 200
        payload = response.json()
        assert payload["finish"] == MEN_FINISH
        assert payload["crews"][0]["blades"] is True

    def test_unknown_dataset(self, client):
        response = client.get("/api/events", params={"dataset": "missing.txt"})
        assert response.status_code == 404

    def test_path_outside_data_dir(self, client):
        response = client.get("/api/events", params={"dataset": "../town_2020.csv"})
        assert response.status_code == 404

    def test_unknown_event(self, client):
        response = client.get("/api/event/5", params={"dataset": "town_2020.csv"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Event 5 not found"

    def test_invalid_results(self, client, data_dir):
        (data_dir / "broken.txt").write_text("Division,A,B,C\n\nResults\no5\n", encoding="utf-8")
        response = client.get("/api/events", params={"dataset": "broken.txt"})
        assert response.status_code == 422
        assert "head of the division" in response.json()["detail"]

    def test_dataset_is_cached(self, client):
        client.get("/api/events", params={"dataset": "town_2020.csv"})
        assert "town_2020.csv" in webapp.dataset_cache


class TestExports:
    def test_flat(self, client):
        response = client.get("/api/export/flat", params={"dataset": "town_2020.csv"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert response.headers["content-disposition"] == "attachment; filename=town_2020.csv"
        assert response.text == FLAT_CSV

    def test_notation(self, client):
        response = client.get("/api/export/notation/0", params={"dataset": "town_2020_men.txt"})
        assert response.status_code == 200
        assert response.headers["content-disposition"] == "attachment; filename=Town_M_2020.txt"
        assert response.text.startswith("Set,Town Bumps\nShort,Town\n")

    def test_notation_unknown_event(self, client):
        response = client.get("/api/export/notation/1", params={"dataset": "town_2020_men.txt"})
        assert response.status_code == 404

    def test_trails(self, client):
        response = client.get("/api/export/trails/1", params={"dataset": "town_2020.csv"})
        assert response.status_code == 200
        assert response.text.splitlines() == [
            "crew,day_0,day_1,day_2,blades,spoons",
            "City 1,1,1,2,0,0",
            "Cantabs 1,2,3,3,0,1",
            "Rob Roy 1,3,2,1,1,0",
        ]

    def test_flat_inconsistent_event(self, client):
        webapp.dataset_cache["odd.txt"] = [analyze_bumps.Event(divisions=[["A"]])]
        response = client.get("/api/export/flat", params={"dataset": "odd.txt"})
        assert response.status_code == 422
        assert "no movement data" in response.json()["detail"]
