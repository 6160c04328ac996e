#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page service failures.

Each kind carries the HTTP status it maps to; the app factory installs one
handler that renders them as ``{"message": ...}``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import status


# -----------------------------------------------------------------------------

class PageError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class PageNotFound(PageError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Unauthorized(PageError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class BadRequest(PageError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Wrong API usage."


class MethodNotAllowed(PageError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = "Method not allowed"


class InternalError(PageError):
    pass


# -----------------------------------------------------------------------------
