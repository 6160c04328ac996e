#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page service
============
Read / update / create / preview for wiki pages.

Each operation takes an explicit :class:`PageRequest` and either returns a
response model or raises a :class:`~filewiki.services.errors.PageError`.
Nothing is retried and nothing is cached between calls: storage failures
surface immediately as ``InternalError``.

Writes follow a check-then-act pattern (exists → write).  Two concurrent
writers to the same key are not serialised here; that is left to the
storage backend.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from filewiki.schemas import OKResponse, PageBody, PageContent, PreviewContent
from filewiki.storage import (
    MARKDOWN,
    Commit, Document,
    DocumentNotFound, PageStorage, StorageError,
)
from .errors import BadRequest, InternalError, MethodNotAllowed, PageNotFound, Unauthorized
from .paths import containing_directory, normalize_path
from .renderer import render_page

log = logging.getLogger(__name__)

NO_RENDER = "no-render"


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PageRequest:
    """Everything an operation may look at, gathered by the HTTP layer."""
    path: str = ""
    body: Any = None                    # raw JSON (bytes / str) or a mapping
    format: Optional[str] = None
    actor: Optional[str] = None


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _require_actor(request: PageRequest) -> str:
    if not request.actor:
        raise Unauthorized()
    return request.actor


def _parse_body(body: Any) -> PageBody:
    if body is None or body == b"" or body == "":
        raise BadRequest()
    try:
        if isinstance(body, (bytes, str)):
            return PageBody.model_validate_json(body)
        return PageBody.model_validate(body)
    except ValidationError:
        raise BadRequest() from None


def _internal(exc: StorageError, key: str) -> InternalError:
    log.error("Storage failure for %s: %s", key, exc)
    return InternalError(str(exc))


def _new_document(data: PageBody, metadata: dict[str, str] | None = None) -> Document:
    metadata = dict(metadata or {})
    if data.title is not None:
        metadata["title"] = data.title
    return Document(content_type=MARKDOWN, content=data.content, metadata=metadata)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Operations
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

async def get_page(storage: PageStorage, request: PageRequest) -> PageContent:
    """Return the page's title and either raw or rendered content."""
    key = normalize_path(request.path)

    try:
        doc = await storage.read(key)
    except DocumentNotFound:
        raise PageNotFound("Not found") from None
    except StorageError as exc:
        raise _internal(exc, key) from exc

    title = doc.metadata.get("title", "")

    if request.format == NO_RENDER:
        return PageContent(title=title, content=doc.content)

    if doc.content_type == MARKDOWN:
        return PageContent(title=title, content=render_page(doc.content))

    raise MethodNotAllowed("Content-type is not allowed here")


# -----------------------------------------------------------------------------

async def update_page(storage: PageStorage, request: PageRequest) -> OKResponse:
    actor = _require_actor(request)
    key = normalize_path(request.path)

    try:
        existing = await storage.read(key)
    except DocumentNotFound:
        raise PageNotFound("Not found, use POST to create.") from None
    except StorageError as exc:
        raise _internal(exc, key) from exc

    data = _parse_body(request.body)
    doc = _new_document(data, existing.metadata)

    try:
        await storage.write(key, doc, Commit(author=actor, message=f"Updated page: {key}"))
    except StorageError as exc:
        raise _internal(exc, key) from exc

    log.info("Page %s updated by %s", key, actor)
    return OKResponse(message="Updated page.")


# -----------------------------------------------------------------------------

async def create_page(storage: PageStorage, request: PageRequest) -> OKResponse:
    actor = _require_actor(request)
    key = normalize_path(request.path)

    try:
        exists = await storage.exists(key)
    except StorageError as exc:
        raise _internal(exc, key) from exc
    if exists:
        raise MethodNotAllowed("Page already exists, use PUT to edit.")

    data = _parse_body(request.body)

    try:
        await storage.make_containing_directory(containing_directory(key))
        await storage.write(key, _new_document(data), Commit(author=actor, message=f"Created new page: {key}"))
    except StorageError as exc:
        raise _internal(exc, key) from exc

    log.info("Page %s created by %s", key, actor)
    return OKResponse(message="Created page.")


# -----------------------------------------------------------------------------

def preview_page(request: PageRequest) -> PreviewContent:
    """Render submitted content without touching storage."""
    data = _parse_body(request.body)
    return PreviewContent(content=render_page(data.content))


# -----------------------------------------------------------------------------
