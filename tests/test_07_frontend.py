#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for static frontend serving and the health check."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from filewiki.routes.frontend import asset_path, cache_headers


# ── Path rule ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("path, expected", [
    ("",               "index.html"),
    ("/",              "index.html"),
    ("docs/",          "docs/index.html"),
    ("app.js",         "app.js"),
    ("/app.js",        "app.js"),
])
def test_asset_path(path, expected):
    assert asset_path(path) == expected


def test_cache_headers_for_scripts():
    headers = cache_headers("app.js")
    assert headers["Cache-Control"] == "public, max-age=31536000"
    assert headers["Content-Type"] == "text/javascript"
    assert headers["Expires"].endswith("GMT")


def test_cache_headers_for_html():
    headers = cache_headers("index.html")
    assert headers["Cache-Control"] == "no-cache, no-store, must-revalidate"
    assert headers["Content-Type"] == "text/html"


# ── HTTP ──────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_index_served_for_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.headers["cache-control"] == "no-cache, no-store, must-revalidate"
    assert "<html" in resp.text


@pytest.mark.asyncio
async def test_script_is_cacheable(client):
    resp = await client.get("/app.js")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/javascript")
    assert resp.headers["cache-control"] == "public, max-age=31536000"
    assert "expires" in resp.headers


@pytest.mark.asyncio
async def test_missing_asset(client):
    resp = await client.get("/missing.js")
    assert resp.status_code == 404
    assert "missing.js" in resp.json()["message"]


@pytest.mark.asyncio
async def test_api_routes_win_over_frontend(client):
    resp = await client.get("/api/page/unknown")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not found"}


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_openapi_advertises_plain_bearer_auth(client):
    resp = await client.get("/api/openapi.json")
    assert resp.status_code == 200
    schemes = resp.json()["components"]["securitySchemes"]
    assert {"type": "http", "scheme": "bearer"} in schemes.values()
    assert "tokenUrl" not in resp.text


@pytest.mark.asyncio
async def test_health_reports_project_version(client):
    resp = await client.get("/api/health")
    assert resp.json()["version"] == "0.3.0"
