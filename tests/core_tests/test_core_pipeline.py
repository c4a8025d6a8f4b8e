"""Tests for core/pipeline.py."""

from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr

from core.cli_errors import ExitCode, NetworkError
from core.pipeline import BaseProducer, ResultEnvelope, SafeProcessor, run_pipeline


class TestResultEnvelopeUnwrap(unittest.TestCase):
    """Tests for ResultEnvelope.unwrap() method."""

    def test_unwrap_returns_payload_when_present(self):
        """Test unwrap returns payload when it exists."""
        envelope = ResultEnvelope(status="success", payload={"data": "value"})
        result = envelope.unwrap()
        self.assertEqual(result, {"data": "value"})

    def test_unwrap_returns_payload_of_any_type(self):
        """Test unwrap works with different payload types."""
        # String payload
        envelope = ResultEnvelope(status="success", payload="test string")
        self.assertEqual(envelope.unwrap(), "test string")

        # List payload
        envelope = ResultEnvelope(status="success", payload=[1, 2, 3])
        self.assertEqual(envelope.unwrap(), [1, 2, 3])

        # Integer payload
        envelope = ResultEnvelope(status="success", payload=42)
        self.assertEqual(envelope.unwrap(), 42)

    def test_unwrap_raises_when_payload_is_none(self):
        """Test unwrap raises ValueError when payload is None."""
        envelope = ResultEnvelope(status="error", payload=None)
        with self.assertRaises(ValueError) as ctx:
            envelope.unwrap()
        self.assertEqual(str(ctx.exception), "No payload")

    def test_unwrap_uses_diagnostics_message(self):
        """Test unwrap uses diagnostics message in ValueError."""
        envelope = ResultEnvelope(
            status="error",
            payload=None,
            diagnostics={"message": "Custom error message"},
        )
        with self.assertRaises(ValueError) as ctx:
            envelope.unwrap()
        self.assertEqual(str(ctx.exception), "Custom error message")

    def test_unwrap_falls_back_to_no_payload_when_no_diagnostics(self):
        """Test unwrap falls back to 'No payload' when diagnostics is None."""
        envelope = ResultEnvelope(status="error", payload=None, diagnostics=None)
        with self.assertRaises(ValueError) as ctx:
            envelope.unwrap()
        self.assertEqual(str(ctx.exception), "No payload")

    def test_unwrap_falls_back_when_diagnostics_has_no_message(self):
        """Test unwrap falls back when diagnostics exists but has no message key."""
        envelope = ResultEnvelope(
            status="error",
            payload=None,
            diagnostics={"code": 500},
        )
        with self.assertRaises(ValueError) as ctx:
            envelope.unwrap()
        self.assertEqual(str(ctx.exception), "No payload")

    def test_unwrap_works_regardless_of_ok_status(self):
        """Test unwrap only checks payload, not ok() status."""
        # Payload exists but status is error - unwrap should still work
        envelope = ResultEnvelope(status="error", payload="still works")
        self.assertEqual(envelope.unwrap(), "still works")


class TestResultEnvelopeOk(unittest.TestCase):
    """Tests for ResultEnvelope.ok() method."""

    def test_ok_returns_true_for_success(self):
        """Test ok() returns True for 'success' status."""
        envelope = ResultEnvelope(status="success", payload="data")
        self.assertTrue(envelope.ok())

    def test_ok_is_case_insensitive(self):
        """Test ok() is case-insensitive for status."""
        self.assertTrue(ResultEnvelope(status="SUCCESS").ok())
        self.assertTrue(ResultEnvelope(status="Success").ok())
        self.assertTrue(ResultEnvelope(status="success").ok())

    def test_ok_returns_false_for_error(self):
        """Test ok() returns False for non-success status."""
        envelope = ResultEnvelope(status="error")
        self.assertFalse(envelope.ok())

    def test_ok_returns_false_for_failed(self):
        """Test ok() returns False for 'failed' status."""
        envelope = ResultEnvelope(status="failed")
        self.assertFalse(envelope.ok())


class TestResultEnvelopeExitCode(unittest.TestCase):
    """Tests for ResultEnvelope.exit_code."""

    def test_success_is_zero(self):
        self.assertEqual(ResultEnvelope(status="success", payload=1).exit_code, 0)

    def test_error_uses_diagnostics_code(self):
        env = ResultEnvelope(status="error", diagnostics={"code": 5})
        self.assertEqual(env.exit_code, 5)

    def test_error_defaults_to_generic_error(self):
        self.assertEqual(ResultEnvelope(status="error").exit_code, ExitCode.ERROR)


class _Doubler(SafeProcessor[int, int]):
    def _process_safe(self, payload: int) -> int:
        if payload < 0:
            raise NetworkError("negative", hint="use a positive number")
        if payload == 0:
            raise RuntimeError("zero")
        return payload * 2


class _Collect(BaseProducer):
    seen: list = []

    def _produce_success(self, payload, diagnostics) -> None:
        _Collect.seen.append(payload)


class TestSafeProcessor(unittest.TestCase):
    """Tests for SafeProcessor error capture."""

    def test_success_wraps_payload(self):
        env = _Doubler().process(4)
        self.assertTrue(env.ok())
        self.assertEqual(env.unwrap(), 8)

    def test_cli_error_keeps_code_and_hint(self):
        env = _Doubler().process(-1)
        self.assertFalse(env.ok())
        self.assertEqual(env.diagnostics["message"], "negative")
        self.assertEqual(env.diagnostics["hint"], "use a positive number")
        self.assertEqual(env.exit_code, ExitCode.NETWORK_ERROR)

    def test_unexpected_error_propagates(self):
        with self.assertRaises(RuntimeError):
            _Doubler().process(0)


class TestRunPipeline(unittest.TestCase):
    """Tests for run_pipeline."""

    def setUp(self):
        _Collect.seen = []

    def test_success_produces_and_returns_zero(self):
        self.assertEqual(run_pipeline(3, _Doubler, _Collect), 0)
        self.assertEqual(_Collect.seen, [6])

    def test_failure_reports_and_returns_code(self):
        err = io.StringIO()
        with redirect_stderr(err):
            rc = run_pipeline(-3, _Doubler, _Collect)
        self.assertEqual(rc, ExitCode.NETWORK_ERROR)
        self.assertEqual(_Collect.seen, [])
        self.assertIn("Error: negative", err.getvalue())


if __name__ == "__main__":
    unittest.main()
