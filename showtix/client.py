"""Thin ShowTix4U client for the transactions search endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .constants import SESSION_COOKIE, TRANSACTIONS_URL
from .errors import DecodeError, HTTPStatusError, RequestError, TransportError
from .models import Customer, decode_customers

LOG = logging.getLogger(__name__)

# Raised by requests before anything goes on the wire
_REQUEST_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
)


class ShowtixClient:
    def __init__(
        self,
        auth_token: str,
        base_url: str = TRANSACTIONS_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth_token = auth_token
        self.base_url = base_url
        self.session = session or requests.Session()

    def __enter__(self) -> "ShowtixClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, params: Dict[str, str]) -> Any:
        LOG.debug("GET %s params=%s", self.base_url, params)
        try:
            # No timeout: a stalled call blocks the run until the server answers.
            resp = self.session.get(
                self.base_url,
                params=params,
                cookies={SESSION_COOKIE: self.auth_token},
            )
        except _REQUEST_BUILD_ERRORS as exc:
            raise RequestError(f"failed to create transactions request: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"failed to call transactions api: {exc}") from exc
        if resp.status_code != 200:
            raise HTTPStatusError(resp.status_code, getattr(resp, "reason", "") or "")
        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"failed to decode transactions response: {exc}") from exc

    def search_transactions(self, event_id: str, page: int) -> List[Customer]:
        """Fetch one page of the event's transactions, grouped by customer."""
        body = self._get({"event_id": event_id, "page": str(page)})
        return decode_customers(body)
