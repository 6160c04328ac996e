#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Filesystem storage backend
==========================
Each document is a JSON file under ``storage_root``; the storage key is the
file's path relative to the root:

    data/wiki/_default.json
    data/wiki/guides/_default.json
    data/wiki/guides/install/_default.json

Every write appends one line to ``.history.jsonl`` in the root:

    {"key": "...", "author": "...", "message": "...", "timestamp": "..."}

Document files are replaced atomically (temp file + rename) so readers
never observe a half-written page.  The commit line is appended only after
the replace succeeds; if that append fails the write reports StorageError
even though the new page is already visible.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import asyncio
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

import aiofiles
from pydantic import ValidationError

from .base import Commit, Document, DocumentNotFound, PageStorage, StorageError

log = logging.getLogger(__name__)

HISTORY_FILE = ".history.jsonl"


# -----------------------------------------------------------------------------

class FileStorage(PageStorage):

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)
        self._history_lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} root={self.root}>"

    # ── Helpers ──────────────────────────────────────────────────────────

    def _resolve(self, key: str) -> Path | None:
        """Absolute path for *key*, or None when it points outside the root."""
        target = (self.root / key).resolve()
        if target != self.root and not target.is_relative_to(self.root):
            return None
        return target

    # ── Port ─────────────────────────────────────────────────────────────

    async def exists(self, key: str) -> bool:
        target = self._resolve(key)
        return target is not None and target.is_file()

    async def read(self, key: str) -> Document:
        target = self._resolve(key)
        if target is None or not target.is_file():
            raise DocumentNotFound(key)
        try:
            async with aiofiles.open(target, "r", encoding="utf-8") as f:
                raw = await f.read()
        except FileNotFoundError:
            raise DocumentNotFound(key) from None
        except OSError as exc:
            raise StorageError(f"Could not read '{key}': {exc.strerror}") from exc
        try:
            return Document.model_validate_json(raw)
        except ValidationError as exc:
            raise StorageError(f"Stored document '{key}' is malformed") from exc

    async def write(self, key: str, document: Document, commit: Commit) -> None:
        target = self._resolve(key)
        if target is None or target == self.root:
            raise StorageError(f"Invalid storage key '{key}'")

        tmp = target.with_name(f".{target.name}.tmp")
        try:
            async with aiofiles.open(tmp, "w", encoding="utf-8") as f:
                await f.write(document.model_dump_json(indent=2))
            os.replace(tmp, target)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Could not write '{key}': {exc.strerror}") from exc

        await self._append_history(key, commit)

    async def make_containing_directory(self, path: str) -> None:
        target = self._resolve(path)
        if target is None:
            raise StorageError(f"Invalid directory '{path}'")
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not create directory '{path}': {exc.strerror}") from exc

    # ── History ──────────────────────────────────────────────────────────

    async def _append_history(self, key: str, commit: Commit) -> None:
        record = {
            "key":       key,
            "author":    commit.author,
            "message":   commit.message,
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }
        async with self._history_lock:
            try:
                async with aiofiles.open(self.root / HISTORY_FILE, "a", encoding="utf-8") as f:
                    await f.write(json.dumps(record) + "\n")
            except OSError as exc:
                # The document itself is already in place at this point.
                log.error("Commit for %s not recorded: %s", key, exc)
                raise StorageError(f"Could not record commit for '{key}'") from exc

    async def history(self) -> list[dict]:
        """All recorded commits, oldest first."""
        path = self.root / HISTORY_FILE
        if not path.is_file():
            return []
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            lines = await f.readlines()
        return [json.loads(line) for line in lines if line.strip()]


# -----------------------------------------------------------------------------
