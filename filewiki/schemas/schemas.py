#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and response serialisation.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Shared
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class OKResponse(BaseModel):
    message: str = "success"


class ErrorResponse(BaseModel):
    message: str


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageBody(BaseModel):
    """Body of PUT / POST page and preview requests."""
    content: str = Field(..., max_length=1_000_000)
    path: Optional[str] = None          # accepted for client compatibility; unused
    title: Optional[str] = Field(None, max_length=512)


# -----------------------------------------------------------------------------

class PageContent(BaseModel):
    title: str = ""
    content: str


# -----------------------------------------------------------------------------

class PreviewContent(BaseModel):
    content: str


# -----------------------------------------------------------------------------
