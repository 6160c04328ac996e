#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for FileWiki tests.
Pages live in an in-memory store so no files are written.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from filewiki.core.security import create_access_token
from filewiki.main import create_app
from filewiki.storage import Commit, Document, MemoryStorage, StorageError, get_storage


# -----------------------------------------------------------------------------

class RecordingStorage(MemoryStorage):
    """MemoryStorage that notes every call made against it."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    async def exists(self, key: str) -> bool:
        self.calls.append(("exists", key))
        return await super().exists(key)

    async def read(self, key: str) -> Document:
        self.calls.append(("read", key))
        return await super().read(key)

    async def write(self, key: str, document: Document, commit: Commit) -> None:
        self.calls.append(("write", key))
        await super().write(key, document, commit)

    async def make_containing_directory(self, path: str) -> None:
        self.calls.append(("mkdir", path))
        await super().make_containing_directory(path)


# -----------------------------------------------------------------------------

class FailingStorage(RecordingStorage):
    """Raises StorageError from the operations named in *failing*."""

    def __init__(self, *failing: str) -> None:
        super().__init__()
        self.failing = set(failing)

    def _check(self, op: str) -> None:
        if op in self.failing:
            raise StorageError(f"{op} failed: disk unavailable")

    async def exists(self, key: str) -> bool:
        self._check("exists")
        return await super().exists(key)

    async def read(self, key: str) -> Document:
        self._check("read")
        return await super().read(key)

    async def write(self, key: str, document: Document, commit: Commit) -> None:
        self._check("write")
        await super().write(key, document, commit)

    async def make_containing_directory(self, path: str) -> None:
        self._check("mkdir")
        await super().make_containing_directory(path)


# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest_asyncio.fixture(scope="function")
async def client(storage):
    """HTTP test client wired to the test's storage."""
    app = create_app()
    app.dependency_overrides[get_storage] = lambda: storage

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Helper functions for tests
# -----------------------------------------------------------------------------

def auth_headers(username: str = "testuser") -> dict:
    return {"Authorization": f"Bearer {create_access_token(username)}"}


def markdown(content: str, title: str | None = None) -> Document:
    metadata = {"title": title} if title is not None else {}
    return Document(content_type="text/markdown", content=content, metadata=metadata)


# -----------------------------------------------------------------------------
