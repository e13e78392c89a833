"""Translation rules from log events to telemetry fields.

This module holds the mapping contract between the logging model and
the telemetry schema: severity tiers and the properties mapping.
"""

import logging

from .models import LogEvent, SeverityLevel

DEFAULT_LABEL_SUFFIX = ": "
DEFAULT_RESERVED_PREFIX = "log4net"


def severity_of(level: int | None) -> SeverityLevel | None:
    """Map an ordered log level onto a telemetry severity tier.

    Each tier is left-closed, right-open: a level equal to a threshold
    belongs to the higher tier. ``None`` maps to ``None`` (unset).
    """
    if level is None:
        return None

    if level < logging.INFO:
        return SeverityLevel.VERBOSE

    if level < logging.WARNING:
        return SeverityLevel.INFORMATION

    if level < logging.ERROR:
        return SeverityLevel.WARNING

    if level < logging.CRITICAL:
        return SeverityLevel.ERROR

    return SeverityLevel.CRITICAL


class EventTranslator:
    """Builds the properties mapping for a log event.

    No external dependencies and no per-call state; one instance is
    shared by every thread that logs.
    """

    def __init__(
        self,
        label_suffix: str = DEFAULT_LABEL_SUFFIX,
        reserved_prefix: str = DEFAULT_RESERVED_PREFIX,
    ):
        """Initialize the translator.

        Args:
            label_suffix: Appended to every fixed label key
                (e.g. ``"LoggerName: "``). Use ``""`` for clean keys.
            reserved_prefix: Context property keys starting with this
                prefix (any letter case) are never copied.
        """
        self.label_suffix = label_suffix
        self.reserved_prefix = reserved_prefix.lower()

    def build_properties(self, event: LogEvent) -> dict[str, str]:
        """Collect event metadata and context properties as strings.

        Fixed fields are added under their label only when not None.
        Location fields are added only when location info is present.
        """
        properties: dict[str, str] = {}

        self._add(properties, "LoggerName", event.logger_name)
        self._add(properties, "ThreadName", event.thread_name)

        location = event.location
        if location is not None:
            self._add(properties, "ClassName", location.class_name)
            self._add(properties, "FileName", location.file_name)
            self._add(properties, "MethodName", location.method_name)
            self._add(properties, "LineNumber", location.line_number)

        self._add(properties, "Domain", event.domain)
        self._add(properties, "Identity", event.identity)

        for key, value in event.properties.items():
            if self.is_reserved(key) or value is None:
                continue
            properties[key] = str(value)

        return properties

    def is_reserved(self, key: str | None) -> bool:
        """Return True for keys that must not reach telemetry."""
        if not key:
            return True
        if not self.reserved_prefix:
            return False
        return str(key).lower().startswith(self.reserved_prefix)

    def _add(self, properties: dict[str, str], label: str, value: str | None) -> None:
        if value is not None:
            properties[label + self.label_suffix] = value
