"""Domain models for the logbridge telemetry adapter.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class LocationInfo:
    """Source location of the call that produced a log event."""

    class_name: str | None
    file_name: str | None
    method_name: str | None
    line_number: str | None


@dataclass(frozen=True)
class LogEvent:
    """A single logging occurrence, as seen by the adapter.

    The core's normalized representation of a framework event. Adapters
    on the logging side build it; nothing in the core mutates it.
    """

    timestamp: datetime
    level: int | None
    rendered_message: str | None
    logger_name: str | None = None
    thread_name: str | None = None
    location: LocationInfo | None = None
    domain: str | None = None
    identity: str | None = None
    user_name: str | None = None
    exception_text: str | None = None
    error: BaseException | None = None
    properties: dict[str, Any] | MappingProxyType[str, Any] = field(
        default_factory=dict
    )  # converted to proxy in __post_init__

    def __post_init__(self) -> None:
        """Convert properties dict to read-only proxy."""
        if isinstance(self.properties, dict):
            object.__setattr__(
                self, "properties", MappingProxyType(self.properties)
            )

    def captured_error(self) -> BaseException | None:
        """Return the exception object attached to this event, if any."""
        return self.error

    @property
    def has_exception(self) -> bool:
        """True when the event carries a non-empty exception text."""
        return bool(self.exception_text)


class SeverityLevel(Enum):
    """Severity tiers of the telemetry schema.

    Values match the Application Insights severity numbering.
    """

    VERBOSE = 0
    INFORMATION = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


@dataclass(frozen=True, kw_only=True)
class TelemetryRecord:
    """Fields common to every record submitted to the telemetry client."""

    severity: SeverityLevel | None = None
    timestamp: datetime | None = None
    user_id: str | None = None
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Convert properties dict to read-only proxy."""
        if isinstance(self.properties, dict):
            object.__setattr__(
                self, "properties", MappingProxyType(self.properties)
            )


@dataclass(frozen=True)
class TraceRecord(TelemetryRecord):
    """A rendered log message."""

    message: str

    def __post_init__(self) -> None:
        """Validate trace invariants on creation."""
        if self.message is None:
            raise ValueError("message must not be None")
        super().__post_init__()


@dataclass(frozen=True)
class ExceptionRecord(TelemetryRecord):
    """A captured exception."""

    error: BaseException

    def __post_init__(self) -> None:
        """Validate exception invariants on creation."""
        if self.error is None:
            raise ValueError("error must not be None")
        super().__post_init__()


class LogAdapterException(Exception):
    """Raised when a log event cannot be translated into a telemetry record.

    The original exception is chained as ``__cause__`` and kept on
    ``cause`` for callers that inspect it directly.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
