"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from app.main import app

BARE_PAGE = '<html><body><img src="a.png"></body></html>'


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


class TestService:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "rules": 27}

    def test_root_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/scan" in response.text


class TestScanEndpoint:

    def test_scan_returns_issues_and_summary(self, client):
        response = client.post("/scan", json={"html": BARE_PAGE, "tier": "standard"})
        assert response.status_code == 200
        body = response.json()
        assert body["tier"] == "standard"
        types = [issue["type"] for issue in body["issues"]]
        assert "Missing Alt Text" in types
        assert "Missing Language of Page" in types
        assert set(body["summary"]) == {"critical", "serious", "moderate", "minor"}
        assert sum(body["summary"].values()) == len(body["issues"])

    def test_issue_shape(self, client):
        body = client.post("/scan", json={"html": BARE_PAGE}).json()
        alt = next(i for i in body["issues"] if i["type"] == "Missing Alt Text")
        assert alt["id"] == "img-alt-0"
        assert alt["severity"] == alt["impact"] == "serious"
        assert alt["selector"] == "img"
        assert alt["element"].startswith("<img")
        assert "Description of image" in alt["fix"]

    def test_default_tier_comes_from_environment(self, client, monkeypatch):
        monkeypatch.setenv("DEFAULT_SCAN_TIER", "full")
        assert client.post("/scan", json={"html": BARE_PAGE}).json()["tier"] == "full"

    def test_empty_markup_is_bad_request(self, client):
        response = client.post("/scan", json={"html": "   "})
        assert response.status_code == 400
        assert response.json()["detail"]

    @pytest.mark.parametrize("payload", [{"tier": "full"}, {"html": BARE_PAGE, "tier": 3}])
    def test_invalid_request_body(self, client, payload):
        assert client.post("/scan", json=payload).status_code == 422

    def test_unknown_tier_is_bad_request(self, client):
        response = client.post("/scan", json={"html": BARE_PAGE, "tier": "premium"})
        assert response.status_code == 400
        assert "premium" in response.json()["detail"]

    def test_tier_name_is_case_insensitive(self, client):
        response = client.post("/scan", json={"html": BARE_PAGE, "tier": " FULL "})
        assert response.status_code == 200
        assert response.json()["tier"] == "full"

    def test_error_responses_are_documented(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        error_ref = "#/components/schemas/ErrorDetail"
        for status in ("400", "413"):
            schema = paths["/scan"]["post"]["responses"][status]["content"]["application/json"]["schema"]
            assert schema["$ref"] == error_ref
        fix_422 = paths["/fix"]["post"]["responses"]["422"]["content"]["application/json"]["schema"]
        assert fix_422["$ref"] == error_ref

    def test_oversized_markup_is_rejected(self, client, monkeypatch):
        monkeypatch.setenv("MAX_MARKUP_BYTES", "64")
        response = client.post("/scan", json={"html": "<p>" + "x" * 100 + "</p>"})
        assert response.status_code == 413


class TestSiteScanEndpoint:

    def test_inconsistent_navigation(self, client):
        pages = [
            '<nav><a href="/">Home</a></nav><p>one</p>',
            '<nav><a href="/">Start</a></nav><p>two</p>',
        ]
        response = client.post("/scan/site", json={"pages": pages})
        assert response.status_code == 200
        assert [i["id"] for i in response.json()["issues"]] == ["nav-consistency-1"]

    def test_unparseable_page_is_bad_request(self, client):
        response = client.post("/scan/site", json={"pages": ["<p>ok</p>", ""]})
        assert response.status_code == 400


class TestReportEndpoint:

    def test_markdown_is_default(self, client):
        response = client.post("/scan/report", json={"html": BARE_PAGE})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert response.text.startswith("# Accessibility results:")

    def test_text_format(self, client):
        response = client.post("/scan/report?format=text", json={"html": BARE_PAGE})
        assert response.status_code == 200
        assert "Accessibility Report:" in response.text
        assert "Missing Alt Text" in response.text

    def test_unknown_format(self, client):
        assert client.post("/scan/report?format=pdf", json={"html": BARE_PAGE}).status_code == 422


class TestFixEndpoint:

    def test_fix_patches_markup(self, client):
        issues = client.post("/scan", json={"html": BARE_PAGE}).json()["issues"]
        alt = next(i for i in issues if i["type"] == "Missing Alt Text")

        response = client.post("/fix", json={"html": BARE_PAGE, "issue": alt})

        assert response.status_code == 200
        patched = response.json()["html"]
        assert 'alt="Description of image"' in patched
        rescanned = client.post("/scan", json={"html": patched}).json()["issues"]
        assert "Missing Alt Text" not in [i["type"] for i in rescanned]

    def test_issue_without_fix_is_unprocessable(self, client):
        issues = client.post("/scan", json={"html": BARE_PAGE}).json()["issues"]
        lang = next(i for i in issues if i["type"] == "Missing Language of Page")

        response = client.post("/fix", json={"html": BARE_PAGE, "issue": lang})

        assert response.status_code == 422
        assert "no fix" in response.json()["detail"]
