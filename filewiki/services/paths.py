#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Path normalisation
==================
Maps a request path onto the storage key of the page it names.  A page is
the ``_default.json`` file of its directory:

    ""        → _default.json
    "a/"      → a/_default.json
    "a"       → a/_default.json
    "a/b"     → a/b/_default.json

This is a suffix rule only.  ``..`` segments, case and percent-escapes are
left untouched; keeping keys inside the store is the backend's job.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import posixpath

DEFAULT_FILE = "_default.json"
SEPARATOR = "/"


# -----------------------------------------------------------------------------

def is_storage_key(path: str) -> bool:
    return path == DEFAULT_FILE or path.endswith(SEPARATOR + DEFAULT_FILE)


def normalize_path(path: str) -> str:
    """Return the storage key for *path*.  Keys are returned unchanged."""
    if not path:
        return DEFAULT_FILE
    if is_storage_key(path):
        return path
    if path.endswith(SEPARATOR):
        return path + DEFAULT_FILE
    return path + SEPARATOR + DEFAULT_FILE


def containing_directory(key: str) -> str:
    """Directory part of *key*, with trailing separator (``""`` for the root)."""
    head, _ = posixpath.split(key)
    return head + SEPARATOR if head else ""


# -----------------------------------------------------------------------------
