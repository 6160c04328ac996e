#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
In-memory storage backend.

Nothing survives a restart.  Used by the test-suite and for throw-away
instances (``STORAGE_BACKEND=memory``).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from .base import Commit, Document, DocumentNotFound, PageStorage


# -----------------------------------------------------------------------------

class MemoryStorage(PageStorage):

    def __init__(self) -> None:
        self.documents: dict[str, Document] = {}
        self.directories: set[str] = {""}
        self.history: list[tuple[str, Commit]] = []

    async def exists(self, key: str) -> bool:
        return key in self.documents

    async def read(self, key: str) -> Document:
        try:
            doc = self.documents[key]
        except KeyError:
            raise DocumentNotFound(key) from None
        return doc.model_copy(deep=True)

    async def write(self, key: str, document: Document, commit: Commit) -> None:
        self.documents[key] = document.model_copy(deep=True)
        self.history.append((key, commit))

    async def make_containing_directory(self, path: str) -> None:
        parts = [p for p in path.split("/") if p]
        for i in range(1, len(parts) + 1):
            self.directories.add("/".join(parts[:i]) + "/")


# -----------------------------------------------------------------------------
