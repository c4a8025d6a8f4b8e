"""Errors raised while exporting an event.

Each maps onto a ``core.cli_errors`` category so the CLI boundary can pick
the exit code without knowing about ShowTix specifics.
"""
from __future__ import annotations

from typing import Optional

from core.cli_errors import DataError, NetworkError, UsageError

from .constants import SESSION_COOKIE


class RequestError(UsageError):
    """The transactions request could not be built (bad URL or scheme)."""


class TransportError(NetworkError):
    """The transactions API could not be reached."""


class HTTPStatusError(NetworkError):
    """The transactions API answered with something other than 200 OK."""

    def __init__(self, status_code: int, reason: str = "", hint: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        if hint is None and status_code in (401, 403):
            hint = f"Log in to ShowTix4U again and pass the fresh '{SESSION_COOKIE}' cookie via --token."
        super().__init__(f"non-success status code from transactions API: {status}", hint)


class DecodeError(DataError):
    """A transactions page was not JSON or did not have the expected shape."""


class DateParseError(DataError):
    """A transaction creation date did not match YYYY-MM-DDTHH:MM:SS.mmmZ."""
