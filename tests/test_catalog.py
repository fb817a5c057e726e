"""
Catalog queries over projects.json: language fallback, tag filter, search, paging.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portfolio_api.app import create_app  # noqa: E402
from portfolio_api.core import config as core_config  # noqa: E402
from portfolio_api.domain.catalog import collect_tags, localize, paginate  # noqa: E402

PROJECTS = {
    "projects": [
        {
            "name": "Weather App",
            "description": {"en": "Forecasts for your city", "it": "Previsioni per la tua citta"},
            "link": "https://example.test/weather",
            "technologies": ["JavaScript", "CSS"],
        },
        {
            "name": "Portfolio",
            "description": "Personal website",
            "technologies": ["HTML", "javascript"],
            "caseStudy": {"en": "How it was built"},
        },
        {
            "name": "Data Cruncher",
            "description": {"it": "Analisi dei dati"},
            "technologies": ["Python"],
        },
    ]
}


@pytest.fixture()
def data_dir(tmp_path, monkeypatch):
    projects = tmp_path / "projects"
    projects.mkdir()
    (projects / "projects.json").write_text(json.dumps(PROJECTS), encoding="utf-8")
    (projects / "skills.json").write_text(json.dumps({"languages": ["Python", "JS"]}), encoding="utf-8")
    monkeypatch.setenv("DATA_DIR", str(projects))
    monkeypatch.setenv("LIKES_FILE", str(tmp_path / "likes.json"))
    monkeypatch.setenv("PAGE_SIZE", "2")
    monkeypatch.delenv("SITE_DIR", raising=False)
    core_config.get_settings.cache_clear()
    yield projects
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(data_dir):
    with TestClient(create_app()) as c:
        yield c


def test_localize_fallbacks():
    assert localize("plain", "it", "en") == "plain"
    assert localize({"en": "hi", "it": "ciao"}, "it", "en") == "ciao"
    assert localize({"en": "hi"}, "it", "en") == "hi"
    assert localize({"it": "ciao"}, "en", "en") == "ciao"
    assert localize({}, "en", "en") == ""


def test_paginate_past_end_is_empty():
    page = paginate([1, 2, 3], page=3, per_page=2)
    assert page["items"] == []
    assert page["pages"] == 2
    assert paginate([], 1, 5)["pages"] == 0


def test_collect_tags_dedupes_case_insensitively():
    assert collect_tags(PROJECTS["projects"]) == ["CSS", "HTML", "JavaScript", "Python"]


def test_projects_first_page_in_italian(client):
    resp = client.get("/projects", params={"lang": "it"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert body["pages"] == 2
    assert body["per_page"] == 2
    assert [p["name"] for p in body["items"]] == ["Weather App", "Portfolio"]
    assert body["items"][0]["description"] == "Previsioni per la tua citta"
    assert body["items"][1]["caseStudy"] == "How it was built"


def test_projects_second_page(client):
    body = client.get("/projects", params={"page": 2}).json()
    assert [p["name"] for p in body["items"]] == ["Data Cruncher"]
    assert body["items"][0]["description"] == "Analisi dei dati"


def test_tag_filter_is_case_insensitive(client):
    body = client.get("/projects", params={"tag": "JAVASCRIPT", "per_page": 10}).json()
    assert {p["name"] for p in body["items"]} == {"Weather App", "Portfolio"}


def test_search_uses_localized_description(client):
    en = client.get("/projects", params={"q": "city", "lang": "en"}).json()
    it = client.get("/projects", params={"q": "city", "lang": "it"}).json()
    assert [p["name"] for p in en["items"]] == ["Weather App"]
    assert it["total"] == 0


def test_items_carry_like_counts(client):
    client.post("/like/Portfolio")
    client.post("/like/Portfolio")
    body = client.get("/projects", params={"per_page": 10}).json()
    likes = {p["name"]: p["likes"] for p in body["items"]}
    assert likes == {"Weather App": 0, "Portfolio": 2, "Data Cruncher": 0}


def test_bad_query_parameters(client):
    assert client.get("/projects", params={"lang": "fr"}).status_code == 422
    assert client.get("/projects", params={"page": 0}).status_code == 422
    assert client.get("/projects", params={"per_page": 500}).status_code == 422


def test_tags_and_raw_documents(client):
    assert client.get("/projects/tags").json() == ["CSS", "HTML", "JavaScript", "Python"]
    assert client.get("/skills").json() == {"languages": ["Python", "JS"]}
    resp = client.get("/timeline")
    assert resp.status_code == 404


def test_bare_array_and_broken_document(client, data_dir, capsys):
    (data_dir / "projects.json").write_text(json.dumps(PROJECTS["projects"][:1]), encoding="utf-8")
    assert client.get("/projects").json()["total"] == 1

    (data_dir / "projects.json").write_text("{oops", encoding="utf-8")
    resp = client.get("/projects")
    assert resp.status_code == 502
    assert "[catalog]" in capsys.readouterr().out


def test_static_site_mount(tmp_path, monkeypatch, data_dir):
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text("<h1>Portfolio</h1>", encoding="utf-8")
    monkeypatch.setenv("SITE_DIR", str(site))
    core_config.get_settings.cache_clear()
    with TestClient(create_app()) as c:
        assert "Portfolio" in c.get("/").text
        assert c.get("/likes").json() == {}
