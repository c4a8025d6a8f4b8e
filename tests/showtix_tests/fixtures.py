"""Shared test fixtures for showtix tests."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

import requests

ISO_CREATED = "2023-05-01T12:00:00.000Z"


class FakeResponse:
    """Fake HTTP response for mocking requests."""

    def __init__(self, body: Any = None, status: int = 200, reason: str = "OK", text: Optional[str] = None):
        self.status_code = status
        self.reason = reason
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Fake HTTP session that returns queued responses (or raises queued errors)."""

    def __init__(self, responses: List[Union[FakeResponse, Exception]]):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, params=None, cookies=None, **kwargs) -> FakeResponse:
        self.calls.append({"url": url, "params": params, "cookies": cookies, "kwargs": kwargs})
        if not self.responses:
            raise AssertionError("No response queued")
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt

    def close(self) -> None:
        self.closed = True


def make_ticket(price: float = 10.0) -> Dict[str, Any]:
    return {"price": price}


def make_transaction(
    txn_id: int = 1,
    donation: float = 0,
    total: float = 0,
    creation_date: str = ISO_CREATED,
    tender_type: str = "Visa",
    tickets: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    return {
        "id": txn_id,
        "donation": donation,
        "total": total,
        "creation_date": creation_date,
        "tender_type": tender_type,
        "tickets": tickets if tickets is not None else [],
    }


def make_customer(
    first: str = "Jane",
    last: str = "Doe",
    transactions: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    return {
        "first_name": first,
        "last_name": last,
        "transactions": transactions if transactions is not None else [],
    }


def make_page(*customers: Dict[str, Any]) -> FakeResponse:
    return FakeResponse({"customers": list(customers)})


def connection_error() -> requests.exceptions.ConnectionError:
    return requests.exceptions.ConnectionError("connection refused")
