#!/usr/bin/env python
#
#
# ----------------------------------------------------------------------------
"""
Security utilities
==================
- JWT access token creation/verification
- FastAPI dependency that extracts the acting user, if any

Token issuance (login, user accounts) lives outside this service; the wiki
only needs to know *who* is writing so commits can be attributed.
"""
# ----------------------------------------------------------------------------

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from .config import get_settings


# ----------------------------------------------------------------------------

class InvalidToken(Exception):
    """Raised when a bearer token cannot be decoded or lacks a subject."""


# ----------------------------------------------------------------------------

# Tokens are issued by an external identity service; this app only
# verifies them, so there is no token endpoint to advertise.
_bearer_optional = HTTPBearer(auto_error=False)


# ----------------------------------------------------------------------------

def create_access_token(subject: str, extra: dict | None = None) -> str:
    s = get_settings()
    expire = datetime.now(tz=timezone.utc) + timedelta(minutes=s.access_token_expire_minutes)
    payload: dict[str, Any] = {
        "sub": str(subject),
        "exp": expire,
        "type": "access",
    }
    if extra:
        payload.update(extra)
    return jwt.encode(payload, s.secret_key, algorithm=s.algorithm)


# ----------------------------------------------------------------------------

def decode_token(token: str) -> dict[str, Any]:
    s = get_settings()
    try:
        payload = jwt.decode(token, s.secret_key, algorithms=[s.algorithm])
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc
    if payload.get("sub") is None:
        raise InvalidToken("Token has no subject")
    return payload


# ----------------------------------------------------------------------------
# FastAPI dependency — API (Bearer token)
# ----------------------------------------------------------------------------

async def get_optional_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_optional),
) -> str | None:
    """Return the actor named by a valid access token, else None.

    Missing and invalid tokens are treated alike; the page service decides
    whether an actor is required for the operation at hand.
    """
    if credentials is None or not credentials.credentials:
        return None
    try:
        payload = decode_token(credentials.credentials)
    except InvalidToken:
        return None
    if payload.get("type") != "access":
        return None
    return payload["sub"]


# ----------------------------------------------------------------------------
