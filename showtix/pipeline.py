"""Pipeline pattern for the event export.

Uses the core pipeline pattern: the processor fetches and flattens,
the producer writes CSV only once both stages have succeeded.
"""
from __future__ import annotations

import io
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.pipeline import BaseProducer, SafeProcessor

from .constants import TRANSACTIONS_URL
from .fetch import fetch_customers
from .models import LineItem
from .transform import flatten
from .writer import write_line_items

LOG = logging.getLogger(__name__)

STDOUT = "-"


# ============================================================================
# Request/Result Types
# ============================================================================

@dataclass
class ExportRequest:
    """Everything one export run needs."""
    event_id: str
    auth_token: str = ""
    base_url: str = TRANSACTIONS_URL
    out: str = STDOUT  # path, or "-" for stdout


@dataclass
class ExportResult:
    """Flattened line items for one event."""
    event_id: str
    customers: int = 0
    line_items: List[LineItem] = field(default_factory=list)
    out: str = STDOUT


# ============================================================================
# Processor
# ============================================================================

class ExportProcessor(SafeProcessor[ExportRequest, ExportResult]):
    """Fetches every page for the event and flattens it into line items."""

    def _process_safe(self, request: ExportRequest) -> ExportResult:
        customers = fetch_customers(
            request.event_id,
            request.auth_token,
            base_url=request.base_url,
        )
        items = flatten(customers)
        LOG.info(
            "event %s: %d customer(s) -> %d line item(s)",
            request.event_id,
            len(customers),
            len(items),
        )
        return ExportResult(
            event_id=request.event_id,
            customers=len(customers),
            line_items=items,
            out=request.out,
        )


# ============================================================================
# Producer
# ============================================================================

class CsvProducer(BaseProducer):
    """Writes the line items as CSV to stdout or to the requested file."""

    def _produce_success(self, payload: ExportResult, diagnostics: Optional[Dict[str, Any]]) -> None:
        if payload.out == STDOUT:
            _write_stdout_utf8(payload.line_items)
            return
        op = Path(payload.out)
        op.parent.mkdir(parents=True, exist_ok=True)
        with op.open("w", newline="", encoding="utf-8") as f:
            rows = write_line_items(payload.line_items, f)
        LOG.info("wrote %s rows=%d", op, rows)


def _write_stdout_utf8(line_items: List[LineItem]) -> None:
    """Render the whole CSV first, then emit it as UTF-8 bytes in one write."""
    buf = io.StringIO()
    write_line_items(line_items, buf)
    data = buf.getvalue()
    binary = getattr(sys.stdout, "buffer", None)
    if binary is None:
        # Already a text sink with no byte layer (e.g. redirected to StringIO)
        sys.stdout.write(data)
        sys.stdout.flush()
        return
    sys.stdout.flush()
    binary.write(data.encode("utf-8"))
    binary.flush()
