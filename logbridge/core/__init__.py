"""Core domain logic for the logbridge telemetry adapter.

This package contains zero external dependencies and represents
the pure translation logic of the application. The logging handler
and the telemetry client integration are handled by the adapters
package.
"""

from .models import (
    ExceptionRecord,
    LocationInfo,
    LogAdapterException,
    LogEvent,
    SeverityLevel,
    TelemetryRecord,
    TraceRecord,
)

__all__ = [
    "ExceptionRecord",
    "LocationInfo",
    "LogAdapterException",
    "LogEvent",
    "SeverityLevel",
    "TelemetryRecord",
    "TraceRecord",
]
