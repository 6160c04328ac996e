#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Storage port
============
The capability interface the page service talks to.  Backends report
failures through the two exception types below; callers never look at the
underlying OS or driver errors.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field


# -----------------------------------------------------------------------------

MARKDOWN = "text/markdown"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Data
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Document(BaseModel):
    content_type: str = MARKDOWN
    content: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)


# -----------------------------------------------------------------------------

class Commit(BaseModel):
    author: str
    message: str


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Errors
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class StorageError(Exception):
    """Any backend failure not attributable to the caller."""


class DocumentNotFound(StorageError):
    """No document is stored under the requested key."""

    def __init__(self, key: str):
        super().__init__(f"Document '{key}' not found")
        self.key = key


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Port
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageStorage(ABC):
    """Versioned document store addressed by storage key."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        ...

    @abstractmethod
    async def read(self, key: str) -> Document:
        """Return the document at *key* or raise DocumentNotFound."""

    @abstractmethod
    async def write(self, key: str, document: Document, commit: Commit) -> None:
        """Store *document* at *key*, recording *commit* as its attribution.

        Overwrites any existing document.  Concurrent writers to the same
        key are not detected by the backends shipped here.
        """

    @abstractmethod
    async def make_containing_directory(self, path: str) -> None:
        """Create directory *path* (and parents).  Must be idempotent."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


# -----------------------------------------------------------------------------
