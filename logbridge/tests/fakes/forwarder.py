"""Fake LogEventPort implementation for testing."""

from logbridge.core.models import LogEvent
from logbridge.core.ports import LogEventPort


class FakeLogEventPort(LogEventPort):
    """In-memory log event port for testing.

    Captures the events a logging adapter produces.
    """

    def __init__(self) -> None:
        """Initialize with empty event history."""
        self.events: list[LogEvent] = []
        self.flush_call_count = 0
        self.should_fail: bool = False
        self.fail_message: str = "Forwarding failed"

    def handle(self, event: LogEvent) -> None:
        """Capture the event for test assertions."""
        if self.should_fail:
            raise RuntimeError(self.fail_message)
        self.events.append(event)

    def flush(self) -> None:
        """Count flushes."""
        self.flush_call_count += 1

    def get_last_event(self) -> LogEvent | None:
        """Get the most recent event, if any."""
        if self.events:
            return self.events[-1]
        return None

    def set_should_fail(self, should_fail: bool, message: str = "Forwarding failed") -> None:
        """Configure the port to fail on the next operation."""
        self.should_fail = should_fail
        self.fail_message = message

    def reset(self) -> None:
        """Reset all captured events and state."""
        self.events.clear()
        self.flush_call_count = 0
        self.should_fail = False
