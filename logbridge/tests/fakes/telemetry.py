"""Fake TelemetryClientPort implementation for testing."""

from logbridge.core.models import ExceptionRecord, TelemetryRecord, TraceRecord
from logbridge.core.ports import TelemetryClientPort


class FakeTelemetryClient(TelemetryClientPort):
    """In-memory telemetry client for testing.

    Captures every submitted record so tests can assert on what the
    core sent without touching a real backend.
    """

    def __init__(self) -> None:
        """Initialize with empty collections."""
        self.exceptions: list[ExceptionRecord] = []
        self.traces: list[TraceRecord] = []
        self.submit_exception_call_count = 0
        self.submit_trace_call_count = 0
        self.flush_call_count = 0
        self._error_to_raise: Exception | None = None

    def set_error(self, error: Exception | None) -> None:
        """Configure the fake to raise an error on every submission.

        Args:
            error: Exception to raise, or None to stop failing.
        """
        self._error_to_raise = error

    def submit_exception(self, record: ExceptionRecord) -> None:
        """Capture an exception record."""
        self.submit_exception_call_count += 1
        if self._error_to_raise:
            raise self._error_to_raise
        self.exceptions.append(record)

    def submit_trace(self, record: TraceRecord) -> None:
        """Capture a trace record."""
        self.submit_trace_call_count += 1
        if self._error_to_raise:
            raise self._error_to_raise
        self.traces.append(record)

    def flush(self) -> None:
        """Count flushes; nothing is buffered."""
        self.flush_call_count += 1

    @property
    def records(self) -> list[TelemetryRecord]:
        """All captured records, exceptions first."""
        return [*self.exceptions, *self.traces]

    def get_last_trace(self) -> TraceRecord | None:
        """Get the most recent trace record, if any."""
        if self.traces:
            return self.traces[-1]
        return None

    def get_last_exception(self) -> ExceptionRecord | None:
        """Get the most recent exception record, if any."""
        if self.exceptions:
            return self.exceptions[-1]
        return None

    def reset(self) -> None:
        """Reset all captured records and call counts."""
        self.exceptions.clear()
        self.traces.clear()
        self.submit_exception_call_count = 0
        self.submit_trace_call_count = 0
        self.flush_call_count = 0
        self._error_to_raise = None
