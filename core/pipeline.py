"""Shared processor/producer scaffolding."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from .cli_errors import CLIError, ExitCode, print_error


ResultT = TypeVar("ResultT")
T = TypeVar("T")
R = TypeVar("R")


@dataclass
class ResultEnvelope(Generic[ResultT]):
    status: str
    payload: Optional[ResultT] = None
    diagnostics: Optional[dict[str, Any]] = None

    def ok(self) -> bool:
        return self.status.lower() == "success"

    def unwrap(self) -> ResultT:
        """Return payload or raise ValueError. Use after ok() check."""
        if self.payload is None:
            msg = (self.diagnostics or {}).get("message", "No payload")
            raise ValueError(msg)
        return self.payload

    @property
    def exit_code(self) -> int:
        if self.ok():
            return int(ExitCode.SUCCESS)
        return int((self.diagnostics or {}).get("code", ExitCode.ERROR))


class BaseProducer:
    """Base class for pipeline producers with common error handling.

    Provides a template method pattern: subclasses override _produce_success()
    to handle successful results while error reporting is centralized here.

    Example usage:
        class MyProducer(BaseProducer):
            def _produce_success(self, payload: MyResult, diagnostics: Optional[dict]) -> None:
                print(f"Success: {payload.message}")
    """

    def produce(self, result: ResultEnvelope) -> None:
        """Template method: report errors, delegate success to subclass."""
        if self.print_error(result):
            return
        if result.payload is not None:
            self._produce_success(result.payload, result.diagnostics)

    def _produce_success(self, payload: Any, diagnostics: Optional[Dict[str, Any]]) -> None:
        """Override in subclass to handle successful result output."""
        raise NotImplementedError("Subclass must implement _produce_success")

    @staticmethod
    def print_error(result: ResultEnvelope) -> bool:
        """Print error message to stderr if result failed. Returns True if it did."""
        if result.ok():
            return False
        diag = result.diagnostics or {}
        print_error(diag.get("message") or "unknown error", diag.get("hint"))
        return True


class SafeProcessor(Generic[T, R]):
    """Base processor with automatic error handling wrapper.

    Provides a template method pattern: subclasses override _process_safe()
    to implement processing logic without manual error handling. A CLIError
    raised inside keeps its exit code and hint in the envelope diagnostics.

    Example usage:
        class MyProcessor(SafeProcessor[Request, Result]):
            def _process_safe(self, payload: Request) -> Result:
                # Implementation that may raise exceptions
                return Result(...)
    """

    def process(self, payload: T) -> ResultEnvelope[R]:
        """Wrap _process_safe with error handling."""
        try:
            result = self._process_safe(payload)
            return ResultEnvelope(status="success", payload=result)
        except CLIError as e:
            return ResultEnvelope(
                status="error",
                diagnostics={"message": e.message, "hint": e.hint, "code": int(e.code)},
            )

    def _process_safe(self, payload: T) -> R:
        """Override to implement processing logic without error handling boilerplate."""
        raise NotImplementedError("Subclass must implement _process_safe")


def run_pipeline(request: Any, processor_cls: type, producer_cls: type) -> int:
    """Execute a pipeline and return CLI exit code.

    Simplifies command handlers by encapsulating the common pattern:
    1. Process the request
    2. Produce output
    3. Return appropriate exit code

    Args:
        request: The request object to process
        processor_cls: Processor class (instantiated with no args)
        producer_cls: Producer class (instantiated with no args)

    Returns:
        0 on success, or the exit code recorded in diagnostics (default 1)
    """
    envelope = processor_cls().process(request)
    producer_cls().produce(envelope)
    return envelope.exit_code
