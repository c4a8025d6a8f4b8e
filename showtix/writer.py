"""CSV serialization of line items for the bookkeeping import."""

from __future__ import annotations

import csv
from typing import Iterable, List, TextIO

from .constants import AMOUNT_FORMAT, CSV_HEADER
from .models import LineItem


def line_item_row(item: LineItem) -> List[str]:
    return [
        str(item.transaction_id),
        item.customer,
        item.receipt_date,
        item.deposit_to,
        item.payment_method,
        item.memo,
        item.line_item_date,
        item.line_item,
        AMOUNT_FORMAT.format(item.amount),
    ]


def write_line_items(line_items: Iterable[LineItem], sink: TextIO) -> int:
    """Write the header and one row per item to ``sink``; return the row count."""
    w = csv.writer(sink, lineterminator="\n")
    w.writerow(CSV_HEADER)
    count = 0
    for item in line_items:
        w.writerow(line_item_row(item))
        count += 1
    return count
