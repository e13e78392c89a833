"""Composition root for the logbridge telemetry adapter.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Telemetry client instantiation
- Core service initialization
- Handler creation and installation
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from logbridge.adapters.handler.stdlib import DEFAULT_FORMAT, TelemetryLogHandler
from logbridge.adapters.telemetry.application_insights import (
    ApplicationInsightsTelemetryClient,
)
from logbridge.config import Settings, load_settings
from logbridge.core.forwarder import DEFAULT_TRACE_MESSAGE, LogEventForwarder
from logbridge.core.translator import (
    DEFAULT_LABEL_SUFFIX,
    DEFAULT_RESERVED_PREFIX,
    EventTranslator,
)

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "logbridge"
SDK_VERSION_PREFIX = "Log4Net: "


def package_version() -> str:
    """Return the installed version of this package."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def sdk_version() -> str:
    """Return the SDK identifier attached to every envelope."""
    return SDK_VERSION_PREFIX + package_version()


def activate(
    instrumentation_key: str,
    endpoint_url: str = "",
    channel_mode: str = "asynchronous",
    level: int = logging.NOTSET,
    log_format: str = DEFAULT_FORMAT,
    label_suffix: str = DEFAULT_LABEL_SUFFIX,
    reserved_prefix: str = DEFAULT_RESERVED_PREFIX,
    trace_fallback_message: str = DEFAULT_TRACE_MESSAGE,
) -> TelemetryLogHandler:
    """Create the telemetry client and a handler that forwards into it.

    Call once at startup. The returned handler owns the only telemetry
    client; attach it to as many loggers as needed.

    Args:
        instrumentation_key: Application Insights instrumentation key.
        endpoint_url: Optional ingestion endpoint override.
        channel_mode: "asynchronous" or "synchronous" delivery.
        level: Minimum level the handler forwards.
        log_format: Formatter pattern for trace messages.
        label_suffix: Suffix of fixed property labels.
        reserved_prefix: Context property prefix that is never forwarded.
        trace_fallback_message: Trace message for events without one.

    Returns:
        A ready TelemetryLogHandler.

    Raises:
        Exception: If the telemetry client cannot be constructed.
    """
    telemetry = ApplicationInsightsTelemetryClient(
        instrumentation_key=instrumentation_key,
        endpoint_url=endpoint_url,
        channel_mode=channel_mode,
        sdk_version=sdk_version(),
    )
    logger.info(f"Telemetry client created ({channel_mode} channel, {telemetry.sdk_version})")

    forwarder = LogEventForwarder(
        telemetry=telemetry,
        translator=EventTranslator(
            label_suffix=label_suffix,
            reserved_prefix=reserved_prefix,
        ),
        trace_fallback_message=trace_fallback_message,
    )
    return TelemetryLogHandler(
        forwarder,
        level=level,
        formatter=logging.Formatter(log_format),
    )


def activate_from_settings(settings: Settings) -> TelemetryLogHandler:
    """Create a handler from validated settings."""
    return activate(
        instrumentation_key=settings.instrumentation_key,
        endpoint_url=settings.endpoint_url,
        channel_mode=settings.channel_mode,
        level=getattr(logging, settings.handler_level, logging.NOTSET),
        log_format=settings.log_format,
        label_suffix=settings.property_label_suffix,
        reserved_prefix=settings.reserved_property_prefix,
        trace_fallback_message=settings.trace_fallback_message,
    )


def install(settings: Settings | None = None) -> TelemetryLogHandler:
    """Load configuration, activate the handler and attach it to a logger.

    Args:
        settings: Settings to use. Loaded from the environment when omitted.

    Returns:
        The installed handler.

    Raises:
        ValidationError: If settings validation fails.
        Exception: If the telemetry client cannot be constructed.
    """
    if settings is None:
        settings = load_settings()

    handler = activate_from_settings(settings)
    target = logging.getLogger(settings.logger_name or None)
    target.addHandler(handler)
    logger.info(
        f"Telemetry handler installed on logger '{target.name}' "
        f"at level {settings.handler_level}"
    )
    return handler


def uninstall(handler: TelemetryLogHandler, logger_name: str = "") -> None:
    """Detach a handler, flush its telemetry and close it."""
    target = logging.getLogger(logger_name or None)
    target.removeHandler(handler)
    handler.close()
    logger.info(f"Telemetry handler removed from logger '{target.name}'")
