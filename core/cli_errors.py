"""Standardized CLI error codes and error handling.

Every failure in an export run maps to one of these errors; the single
top-level boundary (``core.pipeline.run_pipeline`` or ``handle_error``)
turns it into a message on stderr and a process exit code.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Standard CLI exit codes."""
    SUCCESS = 0
    ERROR = 1
    USAGE = 2
    NETWORK_ERROR = 5
    DATA_ERROR = 8
    INTERRUPTED = 130  # Standard for Ctrl+C


@dataclass
class CLIError(Exception):
    """CLI error with exit code and message."""
    message: str
    code: ExitCode = ExitCode.ERROR
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class UsageError(CLIError):
    """Usage/argument error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.USAGE, hint)


class NetworkError(CLIError):
    """Network-related error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.NETWORK_ERROR, hint)


class DataError(CLIError):
    """Remote data could not be decoded or interpreted."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.DATA_ERROR, hint)


def print_error(message: str, hint: Optional[str] = None) -> None:
    """Write an ``Error:``/``Hint:`` pair to stderr."""
    print(f"Error: {message}", file=sys.stderr)
    if hint:
        print(f"Hint: {hint}", file=sys.stderr)


def handle_error(error: BaseException, verbose: bool = False) -> int:
    """Handle an exception and return appropriate exit code.

    Args:
        error: The exception to handle.
        verbose: If True, print stack trace for unexpected errors.

    Returns:
        Exit code to use.
    """
    if isinstance(error, CLIError):
        print_error(error.message, error.hint)
        return error.code

    if isinstance(error, KeyboardInterrupt):
        print("\nInterrupted.", file=sys.stderr)
        return ExitCode.INTERRUPTED

    # Unexpected error
    print_error(str(error) or type(error).__name__)
    if verbose:
        import traceback
        traceback.print_exception(type(error), error, error.__traceback__)
    return ExitCode.ERROR
