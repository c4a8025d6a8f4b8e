"""Flatten customers and their transactions into sales-receipt line items.

Per transaction, in order:
  - a donation line plus its credit card fee line, when the donation is non-zero
  - one income line per ticket, plus a ticketing fee line for each zero-price ticket

All lines of a transaction share its id, customer, tender type and date.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable, List

from .constants import (
    COMP_TICKET_FEE,
    CREDIT_CARD_FEE_ACCOUNT,
    CREDIT_CARD_FEE_RATE,
    DEPOSIT_ACCOUNT,
    DONATION_ACCOUNT,
    TICKET_INCOME_ACCOUNT,
    TICKETING_FEE_ACCOUNT,
)
from .errors import DateParseError
from .models import Customer, LineItem, Transaction

__all__ = [
    "format_date",
    "flatten",
    "customer_line_items",
    "transaction_line_items",
]

# strptime's %f takes 1-6 digits; the API always sends milliseconds
_CREATION_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", re.ASCII)
_CREATION_DATE_FMT = "%Y-%m-%dT%H:%M:%S.%fZ"


def format_date(value: str) -> str:
    """Convert ``2023-05-01T12:00:00.000Z`` to ``2023-05-01``."""
    if not _CREATION_DATE_RE.fullmatch(value or ""):
        raise DateParseError(f"failed to parse date string {value!r}: expected YYYY-MM-DDTHH:MM:SS.mmmZ")
    try:
        parsed = datetime.strptime(value, _CREATION_DATE_FMT)
    except ValueError as exc:
        raise DateParseError(f"failed to parse date string {value!r}: {exc}") from exc
    return parsed.date().isoformat()


def transaction_line_items(customer: Customer, txn: Transaction) -> List[LineItem]:
    date = format_date(txn.creation_date)
    name = customer.display_name
    memo = f"Order: {txn.id}"

    def line(account: str, amount: float) -> LineItem:
        return LineItem(
            transaction_id=txn.id,
            customer=name,
            receipt_date=date,
            deposit_to=DEPOSIT_ACCOUNT,
            payment_method=txn.tender_type,
            memo=memo,
            line_item_date=date,
            line_item=account,
            amount=amount,
        )

    items: List[LineItem] = []
    if txn.donation != 0:
        items.append(line(DONATION_ACCOUNT, txn.donation))
        items.append(line(CREDIT_CARD_FEE_ACCOUNT, -CREDIT_CARD_FEE_RATE * txn.donation))
    for ticket in txn.tickets:
        items.append(line(TICKET_INCOME_ACCOUNT, ticket.price))
        if ticket.price == 0:
            items.append(line(TICKETING_FEE_ACCOUNT, COMP_TICKET_FEE))
    return items


def customer_line_items(customer: Customer) -> List[LineItem]:
    items: List[LineItem] = []
    for txn in customer.transactions:
        items.extend(transaction_line_items(customer, txn))
    return items


def flatten(customers: Iterable[Customer]) -> List[LineItem]:
    """Line items for every customer, in customer then transaction order."""
    items: List[LineItem] = []
    for customer in customers:
        items.extend(customer_line_items(customer))
    return items
