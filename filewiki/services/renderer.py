#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Markup renderer
===============
Turns page Markdown into HTML that is safe to embed as-is.

Two stages, both total (malformed input degrades, it never raises):

  1. mistune renders Markdown (tables, strikethrough, bare URLs).  Relative
     link and image targets are re-rooted under the configured link prefix
     so ``[Install](guides/install)`` points at ``#/wiki/guides/install``.
  2. nh3 sanitises the result with a user-generated-content policy: the
     usual formatting, links and images survive; scripts, styles, event
     handlers and non-http(s)/mailto URLs do not.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional
from urllib.parse import urlsplit

import mistune
import nh3
from mistune.plugins.formatting import strikethrough
from mistune.plugins.table import table
from mistune.plugins.url import url

from filewiki.core.config import get_settings


# -----------------------------------------------------------------------------
# Link prefixing
# -----------------------------------------------------------------------------

_UNPREFIXED_STARTS = ("#", "./", "../")


def prefix_link(link: str, prefix: str) -> str:
    """Root *link* at *prefix* if it is a relative wiki link.

    Absolute URLs (``https://…``, ``mailto:…``, ``//host/…``), in-page anchors
    and explicitly dot-relative links are returned unchanged.
    """
    if not link or not prefix or link.startswith(_UNPREFIXED_STARTS):
        return link
    try:
        parts = urlsplit(link)
    except ValueError:
        return link
    if parts.scheme or parts.netloc:
        return link
    return prefix.rstrip("/") + "/" + link.lstrip("/")


# -----------------------------------------------------------------------------
# Markdown renderer via mistune
# -----------------------------------------------------------------------------

class _WikiRenderer(mistune.HTMLRenderer):
    """HTML renderer that re-roots relative targets under the link prefix."""

    def __init__(self, link_prefix: str):
        # Raw HTML passes through here; the sanitiser deals with it.
        super().__init__(escape=False)
        self.link_prefix = link_prefix

    def safe_url(self, url: str) -> str:
        return super().safe_url(prefix_link(url, self.link_prefix))


@lru_cache(maxsize=8)
def _get_md_renderer(link_prefix: str):
    return mistune.create_markdown(
        renderer=_WikiRenderer(link_prefix),
        plugins=[table, strikethrough, url],
    )


# -----------------------------------------------------------------------------
# Sanitiser via nh3
# -----------------------------------------------------------------------------

_LANGUAGE_CLASS_RE = re.compile(r"^language-[\w+#-]+$")

_URL_SCHEMES = {"http", "https", "mailto"}

_ALLOWED_ATTRIBUTES = {tag: set(attrs) for tag, attrs in nh3.ALLOWED_ATTRIBUTES.items()}
_ALLOWED_ATTRIBUTES.setdefault("code", set()).add("class")


def _filter_attribute(tag: str, attribute: str, value: str) -> Optional[str]:
    # Fenced code keeps its language hint and nothing else.
    if attribute == "class":
        if tag == "code" and _LANGUAGE_CLASS_RE.match(value):
            return value
        return None
    return value


def sanitize(html: str) -> str:
    return nh3.clean(
        html,
        attributes=_ALLOWED_ATTRIBUTES,
        attribute_filter=_filter_attribute,
        url_schemes=_URL_SCHEMES,
        link_rel="nofollow noopener noreferrer",
    )


# -----------------------------------------------------------------------------
# Public render function
# -----------------------------------------------------------------------------

def render_page(content: str, link_prefix: Optional[str] = None) -> str:
    """
    Render Markdown *content* to sanitised HTML.

    Parameters
    ----------
    content     : raw Markdown source
    link_prefix : route prefix for relative links; defaults to the
                  ``link_prefix`` setting (``#/wiki``)
    """
    if link_prefix is None:
        link_prefix = get_settings().link_prefix
    # Lone surrogates cannot cross into the sanitiser; replace them.
    content = content.encode("utf-8", "replace").decode("utf-8")
    html = _get_md_renderer(link_prefix)(content)
    return sanitize(html)


# -----------------------------------------------------------------------------
