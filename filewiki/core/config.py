#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from filewiki._version import __version__ as _pkg_version


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "FileWiki"
    app_version: str = _pkg_version
    debug: bool = False
    log_level: str = "INFO"

    # ── Auth / JWT ─────────────────────────────────────────────────────────

    secret_key: str = "CHANGE-ME-IN-PRODUCTION-use-a-random-64-char-hex-string"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 8   # 8 hours

    # ── Storage ────────────────────────────────────────────────────────────

    storage_backend: Literal["filesystem", "memory"] = "filesystem"
    storage_root: Path = Path("./data/wiki")

    # ── Rendering ──────────────────────────────────────────────────────────

    # Relative links in page content are rooted here (frontend hash router).
    link_prefix: str = "#/wiki"

    # ── CORS ───────────────────────────────────────────────────────────────

    cors_origins: list[str] = [
        "http://localhost:8000",
        "http://localhost:8080",
    ]


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
