"""Command-line entry point for the ShowTix event export.

Usage examples:
  # Event 1234 to stdout
  python -m showtix --event 1234 --token "$CONNECT_SID" > receipts.csv

  # Write to a file, with request logging on stderr
  showtix-export --event 1234 --token "$CONNECT_SID" --out out/showtix/1234.csv -v

The token is the value of the 'connect.sid' cookie from a logged-in
ShowTix4U browser session.
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from core.cli_errors import handle_error
from core.pipeline import run_pipeline

from . import APP_ID, PURPOSE
from .constants import SESSION_COOKIE, TRANSACTIONS_URL
from .pipeline import STDOUT, CsvProducer, ExportProcessor, ExportRequest

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=APP_ID, description=PURPOSE)
    p.add_argument("--event", required=True, help="event ID to query")
    p.add_argument("--token", default="", help=f"API token pulled from the '{SESSION_COOKIE}' cookie")
    p.add_argument("--out", default=STDOUT, help="Output CSV path (default: stdout)")
    p.add_argument("--base-url", default=TRANSACTIONS_URL, help="Transactions search endpoint")
    p.add_argument("--verbose", "-v", action="store_true", help="Log requests and progress to stderr")
    return p


def configure_logging(verbose: bool) -> None:
    # stdout carries the CSV, so logs always go to stderr
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def request_from_args(args: argparse.Namespace) -> ExportRequest:
    return ExportRequest(
        event_id=args.event,
        auth_token=args.token,
        base_url=args.base_url,
        out=args.out,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run_pipeline(request_from_args(args), ExportProcessor, CsvProducer)
    except (Exception, KeyboardInterrupt) as e:
        return handle_error(e, verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
