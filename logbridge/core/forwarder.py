"""Log event forwarding for the telemetry adapter.

This module implements the single entry point that classifies a log
event, builds the matching telemetry record and submits it through
the telemetry client port.
"""

from .models import (
    ExceptionRecord,
    LogAdapterException,
    LogEvent,
    TraceRecord,
)
from .ports import LogEventPort, TelemetryClientPort
from .translator import EventTranslator, severity_of

DEFAULT_TRACE_MESSAGE = "Log4Net Trace"


class LogEventForwarder(LogEventPort):
    """Implements the log event to telemetry translation.

    This service:
    - Routes events with exception text to the exception path
    - Routes every other event to the trace path
    - Wraps record construction faults in LogAdapterException

    Holds no per-call state; safe to share across threads.
    """

    def __init__(
        self,
        telemetry: TelemetryClientPort,
        translator: EventTranslator | None = None,
        trace_fallback_message: str = DEFAULT_TRACE_MESSAGE,
    ):
        self.telemetry = telemetry
        self.translator = translator or EventTranslator()
        self.trace_fallback_message = trace_fallback_message

    def handle(self, event: LogEvent) -> None:
        """Submit exactly one telemetry record for the event."""
        if event.has_exception:
            self.send_exception(event)
            return
        self.send_trace(event)

    def send_exception(self, event: LogEvent) -> None:
        """Build and submit an exception record.

        A missing captured error is a construction fault, not a trace.
        """
        try:
            record = ExceptionRecord(
                event.captured_error(),  # type: ignore[arg-type]
                **self._common_fields(event),
            )
        except ValueError as e:
            raise LogAdapterException(str(e), e) from e
        self.telemetry.submit_exception(record)

    def send_trace(self, event: LogEvent) -> None:
        """Build and submit a trace record."""
        message = (
            event.rendered_message
            if event.rendered_message is not None
            else self.trace_fallback_message
        )
        try:
            record = TraceRecord(message, **self._common_fields(event))
        except ValueError as e:
            raise LogAdapterException(str(e), e) from e
        self.telemetry.submit_trace(record)

    def _common_fields(self, event: LogEvent) -> dict:
        return {
            "severity": severity_of(event.level),
            "timestamp": event.timestamp,
            "user_id": event.user_name,
            "properties": self.translator.build_properties(event),
        }

    def flush(self) -> None:
        """Flush the telemetry client."""
        self.telemetry.flush()
