#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the editor preview endpoint."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_preview_renders_markdown(client, storage):
    resp = await client.post("/api/preview", json={"content": "# Draft\n\n*soon*"})
    assert resp.status_code == 200
    body = resp.json()
    assert "<h1>Draft</h1>" in body["content"]
    assert "<em>soon</em>" in body["content"]


@pytest.mark.asyncio
async def test_preview_never_touches_storage(client, storage):
    resp = await client.post("/api/preview", json={"content": "x", "path": "no/such/page"})
    assert resp.status_code == 200
    assert storage.calls == []


@pytest.mark.asyncio
async def test_preview_is_sanitised(client):
    resp = await client.post("/api/preview", json={"content": "<script>alert(1)</script>hi"})
    assert "<script" not in resp.json()["content"]


@pytest.mark.asyncio
async def test_preview_rewrites_relative_links(client):
    resp = await client.post("/api/preview", json={"content": "[next](guides/next)"})
    assert 'href="#/wiki/guides/next"' in resp.json()["content"]


@pytest.mark.asyncio
async def test_preview_malformed_body(client):
    resp = await client.post("/api/preview", content=b"nope", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Wrong API usage."}


@pytest.mark.asyncio
async def test_preview_empty_body(client):
    resp = await client.post("/api/preview")
    assert resp.status_code == 400
