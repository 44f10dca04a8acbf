"""Tests for the Flask web front end."""

from __future__ import annotations

import pytest

from bookworm.registry import LoadError
from bookworm.solver import RackSolver, ScoredWord


@pytest.fixture
def client(small_registry, monkeypatch):
    import web.app as web_app

    monkeypatch.setattr(web_app, "REGISTRY", small_registry)
    monkeypatch.setattr(web_app, "SOLVER", RackSolver(small_registry))
    monkeypatch.setattr(web_app, "LOAD_ERRORS", {})
    web_app.app.config["TESTING"] = True
    with web_app.app.test_client() as c:
        yield c


class TestResultsToJson:
    def test_shape(self) -> None:
        from web.app import results_to_json
        payload = results_to_json({"words": [ScoredWord("quiet", 5.75)], "colors": []})
        assert payload == {
            "words": [{"word": "quiet", "strength": 5.75}],
            "colors": [],
        }


class TestSolveRoute:
    def test_returns_every_dictionary(self, client) -> None:
        resp = client.post("/solve", json={"letters": "Q u i e t"})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["letters"] == "quiet"
        assert set(body["results"]) == {"colors", "mammals", "metals", "words"}
        assert body["results"]["colors"] == []
        words = [w["word"] for w in body["results"]["words"]]
        assert words == ["quiet", "quite", "quit", "tie"]

    def test_at_most_ten_per_dictionary(self, client) -> None:
        resp = client.post("/solve", json={"letters": "abcdefilnqtuaeet"})
        body = resp.get_json()
        assert all(len(ws) <= 10 for ws in body["results"].values())
        # All 17 words in the small list fit this rack
        assert len(body["results"]["words"]) == 10
        assert body["results"]["words"][0] == {"word": "quiet", "strength": 5.75}

    @pytest.mark.parametrize("payload", [{}, {"letters": ""}, {"letters": "123"}])
    def test_rejects_empty_rack(self, client, payload) -> None:
        resp = client.post("/solve", json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_rejects_long_rack(self, client) -> None:
        resp = client.post("/solve", json={"letters": "a" * 17})
        assert resp.status_code == 400

    def test_rejects_non_string(self, client) -> None:
        resp = client.post("/solve", json={"letters": ["q", "u"]})
        assert resp.status_code == 400

    @pytest.mark.parametrize("payload", [["quiet"], "quiet", 5])
    def test_rejects_json_that_is_not_an_object(self, client, payload) -> None:
        resp = client.post("/solve", json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_rejects_non_json_body(self, client) -> None:
        resp = client.post("/solve", data="quiet", content_type="text/plain")
        assert resp.status_code == 400


class TestDictionariesRoute:
    def test_lists_word_counts(self, client) -> None:
        body = client.get("/dictionaries").get_json()
        names = [d["name"] for d in body["dictionaries"]]
        assert names == ["colors", "mammals", "metals", "words"]
        assert body["dictionaries"][2]["word_count"] == 5
        assert body["errors"] == {}

    def test_reports_load_errors(self, client, monkeypatch) -> None:
        import web.app as web_app

        monkeypatch.setattr(
            web_app, "LOAD_ERRORS", {"gems": LoadError("gems", "word list not found")},
        )
        body = client.get("/dictionaries").get_json()
        assert body["errors"] == {"gems": "word list not found"}


class TestIndexPage:
    def test_renders(self, client) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        assert b"Bookworm Solver" in resp.data
        assert b"mammals" in resp.data
