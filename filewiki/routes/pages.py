#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pages router
============
GET    /api/page/{path}                 — rendered page (?format=no-render for source)
PUT    /api/page/{path}                 — replace an existing page   [auth]
POST   /api/page/{path}                 — create a new page          [auth]
POST   /api/preview                     — render content without saving

``{path}`` may be empty (the wiki's front page) or end in ``/``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from filewiki.core.security import get_optional_user_id
from filewiki.schemas import ErrorResponse, OKResponse, PageContent, PreviewContent
from filewiki.services import pages as page_svc
from filewiki.services.pages import PageRequest
from filewiki.storage import PageStorage, get_storage


# -----------------------------------------------------------------------------

router = APIRouter(tags=["pages"])

_errors = {code: {"model": ErrorResponse} for code in (400, 401, 404, 405, 500)}


def page_path(path: str) -> str:
    """Strip leading separators so keys stay relative to the store root.

    ``/api/page//x`` and ``/api/page/x`` name the same page.
    """
    return path.lstrip("/")


# ── Read ──────────────────────────────────────────────────────────────────────

@router.get("/page/{path:path}", response_model=PageContent, responses=_errors)
async def get_page(
    path: str,
    format: Optional[str] = Query(None),
    storage: PageStorage  = Depends(get_storage),
):
    return await page_svc.get_page(storage, PageRequest(path=page_path(path), format=format))


# ── Update ────────────────────────────────────────────────────────────────────

@router.put("/page/{path:path}", response_model=OKResponse, responses=_errors)
async def update_page(
    path: str,
    request: Request,
    user_id: Optional[str] = Depends(get_optional_user_id),
    storage: PageStorage   = Depends(get_storage),
):
    # The body is read raw so that a missing actor is reported before a
    # malformed body, and malformed JSON comes back as 400 rather than 422.
    body = await request.body()
    return await page_svc.update_page(storage, PageRequest(path=page_path(path), body=body, actor=user_id))


# ── Create ────────────────────────────────────────────────────────────────────

@router.post("/page/{path:path}", response_model=OKResponse, responses=_errors)
async def create_page(
    path: str,
    request: Request,
    user_id: Optional[str] = Depends(get_optional_user_id),
    storage: PageStorage   = Depends(get_storage),
):
    body = await request.body()
    return await page_svc.create_page(storage, PageRequest(path=page_path(path), body=body, actor=user_id))


# ── Preview ───────────────────────────────────────────────────────────────────

@router.post("/preview", response_model=PreviewContent, responses=_errors)
async def preview_page(request: Request):
    """Render Markdown for the editor's live preview."""
    body = await request.body()
    return page_svc.preview_page(PageRequest(body=body))


# ── Front page without a trailing slash ───────────────────────────────────────
# The frontend catch-all would otherwise claim ``/api/page``.

@router.get("/page", response_model=PageContent, include_in_schema=False)
async def get_front_page(
    format: Optional[str] = Query(None),
    storage: PageStorage  = Depends(get_storage),
):
    return await get_page("", format, storage)


@router.put("/page", response_model=OKResponse, include_in_schema=False)
async def update_front_page(
    request: Request,
    user_id: Optional[str] = Depends(get_optional_user_id),
    storage: PageStorage   = Depends(get_storage),
):
    return await update_page("", request, user_id, storage)


@router.post("/page", response_model=OKResponse, include_in_schema=False)
async def create_front_page(
    request: Request,
    user_id: Optional[str] = Depends(get_optional_user_id),
    storage: PageStorage   = Depends(get_storage),
):
    return await create_page("", request, user_id, storage)


# -----------------------------------------------------------------------------
