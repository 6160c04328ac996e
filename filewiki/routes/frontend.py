#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Frontend router — serves the single-page app shipped in ``filewiki/static``.

Paths follow the same suffix rule as page keys, with ``index.html`` as the
directory file.  Scripts are cacheable for a year; HTML is never cached so
a deploy is picked up on the next load.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import mimetypes
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from pathlib import Path

import aiofiles
from fastapi import APIRouter, Response

from filewiki.services.errors import PageNotFound


# -----------------------------------------------------------------------------

router = APIRouter(tags=["frontend"], include_in_schema=False)

STATIC_DIR = (Path(__file__).parent.parent / "static").resolve()
INDEX_FILE = "index.html"


# -----------------------------------------------------------------------------

def asset_path(path: str) -> str:
    """Map a request path onto a file name under the static directory."""
    if not path:
        return INDEX_FILE
    if path.endswith("/"):
        path += INDEX_FILE
    return path.lstrip("/")


def _http_date(delta: timedelta) -> str:
    return format_datetime(datetime.now(tz=timezone.utc) + delta, usegmt=True)


def cache_headers(path: str) -> dict[str, str]:
    ext = Path(path).suffix.lower()
    if ext == ".js":
        return {
            "Expires":       _http_date(timedelta(days=365)),
            "Cache-Control": "public, max-age=31536000",
            "Content-Type":  "text/javascript",
        }
    if ext == ".html":
        return {
            "Expires":       _http_date(timedelta(days=-30)),
            "Cache-Control": "no-cache, no-store, must-revalidate",
            "Content-Type":  "text/html",
        }
    media_type, _ = mimetypes.guess_type(path)
    return {"Content-Type": media_type or "application/octet-stream"}


# -----------------------------------------------------------------------------

@router.get("/{path:path}")
async def get_asset(path: str):
    name = asset_path(path)
    target = (STATIC_DIR / name).resolve()
    if not target.is_relative_to(STATIC_DIR) or not target.is_file():
        raise PageNotFound(f"Asset '{name}' not found")

    async with aiofiles.open(target, "rb") as f:
        content = await f.read()

    headers = cache_headers(name)
    media_type = headers.pop("Content-Type")
    return Response(content=content, media_type=media_type, headers=headers)


# -----------------------------------------------------------------------------
