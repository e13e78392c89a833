"""Port interfaces for the logbridge telemetry adapter.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - TelemetryClientPort: Submit records to the telemetry backend

2. **Driving Ports** (adapters/external systems call into core)
   - LogEventPort: Entry point for a single log event
"""

from abc import ABC, abstractmethod

from .models import ExceptionRecord, LogEvent, TraceRecord


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class TelemetryClientPort(ABC):
    """Port for submitting telemetry records to an ingestion backend.

    Adapters implementing this port own the wire protocol, batching,
    retry and delivery. Submission is fire-and-forget from the core's
    point of view: methods enqueue and return.

    Implementations must be safe to call from multiple threads.
    """

    @abstractmethod
    def submit_exception(self, record: ExceptionRecord) -> None:
        """Submit an exception record for delivery.

        Args:
            record: The exception record to submit.

        Raises:
            Exception: If the record cannot be enqueued.
        """

    @abstractmethod
    def submit_trace(self, record: TraceRecord) -> None:
        """Submit a trace record for delivery.

        Args:
            record: The trace record to submit.

        Raises:
            Exception: If the record cannot be enqueued.
        """

    @abstractmethod
    def flush(self) -> None:
        """Push any buffered records to the backend.

        Called when the logging side shuts down. May block until the
        buffered records have been handed to the transport.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class LogEventPort(ABC):
    """Port for receiving log events from a logging framework.

    Called once per event, synchronously, possibly from many threads.
    """

    @abstractmethod
    def handle(self, event: LogEvent) -> None:
        """Translate one log event and submit it as telemetry.

        Exactly one record is submitted per event: an exception record
        when the event carries exception text, a trace record otherwise.

        Args:
            event: The log event to forward.

        Raises:
            LogAdapterException: If the record cannot be constructed.
            Exception: Any other failure propagates unchanged.
        """

    @abstractmethod
    def flush(self) -> None:
        """Push records submitted so far towards the telemetry backend."""
