"""Standard library logging handler.

Implements the logging side of the adapter: a ``logging.Handler`` that
normalizes each ``LogRecord`` into a LogEvent and hands it to the
LogEventPort. Failures go through ``Handler.handleError``, the logging
framework's own error policy.
"""

import copy
import getpass
import logging
from datetime import datetime, timezone

from logbridge.core.models import LocationInfo, LogEvent
from logbridge.core.ports import LogEventPort

# Placeholder logging uses when the caller frame cannot be found.
_UNKNOWN_FILE = "(unknown file)"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
# user_name and identity are read into dedicated LogEvent fields.
_STANDARD_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "user_name", "identity"}

DEFAULT_FORMAT = "%(message)s"


def _process_user() -> str | None:
    """Return the login name of the process owner, if it can be determined."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return None


def _location(record: logging.LogRecord) -> LocationInfo | None:
    """Return source location for the record, or None when unknown."""
    if not record.pathname or record.pathname == _UNKNOWN_FILE:
        return None
    return LocationInfo(
        class_name=record.module,
        file_name=record.pathname,
        method_name=record.funcName,
        line_number=str(record.lineno) if record.lineno is not None else None,
    )


def _context_properties(record: logging.LogRecord) -> dict:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_RECORD_ATTRIBUTES
    }


class TelemetryLogHandler(logging.Handler):
    """Forwards log records to telemetry through a LogEventPort.

    The handler requires a layout: a formatter renders the trace
    message, and a default one is installed when none is given.
    """

    def __init__(
        self,
        forwarder: LogEventPort,
        level: int = logging.NOTSET,
        formatter: logging.Formatter | None = None,
        user_name: str | None = None,
    ):
        """Initialize the handler.

        Args:
            forwarder: Receives one LogEvent per emitted record.
            level: Minimum level handled.
            formatter: Layout used to render messages.
            user_name: User reported on every event. Defaults to the
                process owner; a ``user_name`` extra on a record wins.
        """
        super().__init__(level)
        self.forwarder = forwarder
        self.setFormatter(formatter or logging.Formatter(DEFAULT_FORMAT))
        self.user_name = user_name if user_name is not None else _process_user()

    def emit(self, record: logging.LogRecord) -> None:
        """Translate and forward one record."""
        try:
            self.forwarder.handle(self.to_event(record))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def to_event(self, record: logging.LogRecord) -> LogEvent:
        """Build the LogEvent view of a LogRecord."""
        exc_info = record.exc_info if isinstance(record.exc_info, tuple) else None
        if exc_info and exc_info[0] is None:
            # exc_info=True outside an except block. The record is shared with
            # other handlers, so only a copy is cleared.
            record = copy.copy(record)
            record.exc_info = None
            record.exc_text = None
            exc_info = None

        exception_text = self._exception_text(record, exc_info)

        return LogEvent(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
            level=getattr(record, "levelno", None),
            rendered_message=None if record.msg is None else self.format(record),
            logger_name=record.name,
            thread_name=record.threadName,
            location=_location(record),
            domain=record.processName,
            identity=getattr(record, "identity", None),
            user_name=getattr(record, "user_name", self.user_name),
            exception_text=exception_text,
            error=exc_info[1] if exc_info else None,
            properties=_context_properties(record),
        )

    def flush(self) -> None:
        """Flush records buffered by the telemetry client."""
        self.acquire()
        try:
            self.forwarder.flush()
        finally:
            self.release()

    def close(self) -> None:
        """Flush the telemetry client, then close the handler."""
        try:
            self.flush()
        finally:
            super().close()

    def _exception_text(self, record: logging.LogRecord, exc_info: tuple | None) -> str | None:
        """Return the text form of the record's exception.

        Records that crossed a process boundary keep ``exc_text`` but
        lose ``exc_info``; the text alone still marks them as exception
        events.
        """
        if exc_info and exc_info[0] is not None and not record.exc_text:
            formatter = self.formatter or logging.Formatter()
            record.exc_text = formatter.formatException(exc_info)
        return record.exc_text or None
