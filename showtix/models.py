"""Data model for the transactions search payload and the CSV line items.

Payload records decode the way the ticketing API reports them: a key that
is missing takes its zero value, a key with the wrong shape is an error.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .errors import DecodeError

__all__ = [
    "Ticket",
    "Transaction",
    "Customer",
    "LineItem",
    "decode_customers",
]

TransactionId = Union[int, str]


def _require_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"failed to decode {what}: expected object, got {type(value).__name__}")
    return value


def _list_field(data: Dict[str, Any], key: str, what: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"failed to decode {what}.{key}: expected list, got {type(value).__name__}")
    return value


def _number_field(data: Dict[str, Any], key: str, what: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"failed to decode {what}.{key}: expected number, got {value!r}")
    return float(value)


def _string_field(data: Dict[str, Any], key: str, what: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"failed to decode {what}.{key}: expected string, got {value!r}")
    return value


def _id_field(data: Dict[str, Any], key: str, what: str) -> TransactionId:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise DecodeError(f"failed to decode {what}.{key}: expected integer id, got {value!r}")
    return value


@dataclass
class Ticket:
    price: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "Ticket":
        obj = _require_object(data, "ticket")
        return cls(price=_number_field(obj, "price", "ticket"))


@dataclass
class Transaction:
    id: TransactionId = 0
    donation: float = 0.0
    total: float = 0.0
    creation_date: str = ""
    tender_type: str = ""
    tickets: List[Ticket] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Transaction":
        obj = _require_object(data, "transaction")
        return cls(
            id=_id_field(obj, "id", "transaction"),
            donation=_number_field(obj, "donation", "transaction"),
            total=_number_field(obj, "total", "transaction"),
            creation_date=_string_field(obj, "creation_date", "transaction"),
            tender_type=_string_field(obj, "tender_type", "transaction"),
            tickets=[Ticket.from_dict(t) for t in _list_field(obj, "tickets", "transaction")],
        )


@dataclass
class Customer:
    first_name: str = ""
    last_name: str = ""
    transactions: List[Transaction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Customer":
        obj = _require_object(data, "customer")
        return cls(
            first_name=_string_field(obj, "first_name", "customer"),
            last_name=_string_field(obj, "last_name", "customer"),
            transactions=[
                Transaction.from_dict(t) for t in _list_field(obj, "transactions", "customer")
            ],
        )

    @property
    def display_name(self) -> str:
        """``Last, First`` with surrounding whitespace removed from each part."""
        return f"{self.last_name.strip()}, {self.first_name.strip()}"


@dataclass(frozen=True)
class LineItem:
    """One row of the sales-receipt import."""
    transaction_id: TransactionId
    customer: str
    receipt_date: str
    deposit_to: str
    payment_method: str
    memo: str
    line_item_date: str
    line_item: str
    amount: float


def decode_customers(body: Any) -> List[Customer]:
    """Decode one transactions search page into customers."""
    page = _require_object(body, "transactions page")
    return [Customer.from_dict(c) for c in _list_field(page, "customers", "transactions page")]
