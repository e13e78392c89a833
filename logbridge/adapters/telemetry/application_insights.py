"""Application Insights telemetry client adapter.

Implements TelemetryClientPort on top of the applicationinsights SDK.
Records are converted into the SDK's data contracts and queued on the
client's telemetry channel; batching, transport and retry stay with
the SDK.
"""

import logging
import traceback
from datetime import datetime, timezone
from typing import Any

from applicationinsights import TelemetryClient, channel
from applicationinsights.channel import contracts

from logbridge.core.models import ExceptionRecord, TelemetryRecord, TraceRecord
from logbridge.core.ports import TelemetryClientPort

logger = logging.getLogger(__name__)

# Context sections whose tags are copied onto every envelope, in write order.
_CONTEXT_TAG_SOURCES = (
    "device",
    "cloud",
    "application",
    "user",
    "session",
    "location",
    "operation",
)


def build_channel(
    endpoint_url: str = "", channel_mode: str = "asynchronous"
) -> channel.TelemetryChannel:
    """Create a telemetry channel for the given delivery mode.

    Args:
        endpoint_url: Ingestion endpoint. Empty uses the SDK default.
        channel_mode: "asynchronous" sends from a background thread,
            "synchronous" sends from the logging thread once the queue fills.

    Returns:
        A configured TelemetryChannel.

    Raises:
        ValueError: If channel_mode is unknown.
    """
    sender_kwargs: dict[str, Any] = {}
    if endpoint_url:
        sender_kwargs["service_endpoint_uri"] = endpoint_url

    if channel_mode == "asynchronous":
        queue = channel.AsynchronousQueue(channel.AsynchronousSender(**sender_kwargs))
    elif channel_mode == "synchronous":
        queue = channel.SynchronousQueue(channel.SynchronousSender(**sender_kwargs))
    else:
        raise ValueError(f"Unknown channel mode: {channel_mode}")

    return channel.TelemetryChannel(None, queue)


def _format_time(timestamp: datetime | None) -> str:
    """Format a timestamp the way the ingestion endpoint expects (UTC, Z)."""
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    elif timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _exception_chain(error: BaseException) -> list[BaseException]:
    """Return the error followed by the exceptions it was raised from.

    Follows ``__cause__``, then ``__context__`` unless suppressed, the same
    way tracebacks are printed.
    """
    chain = []
    seen = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return chain


def _stack_frames(error: BaseException) -> list[contracts.StackFrame]:
    frames = []
    for level, frame_summary in enumerate(traceback.extract_tb(error.__traceback__)):
        frame = contracts.StackFrame()
        frame.level = level
        frame.method = frame_summary.name
        frame.assembly = "Unknown"
        frame.file_name = frame_summary.filename
        frame.line = frame_summary.lineno or 0
        frames.append(frame)
    # innermost frame first
    frames.reverse()
    return frames


def _exception_details(error: BaseException) -> list[contracts.ExceptionDetails]:
    """Describe an exception chain as ExceptionDetails contracts.

    The logged error comes first with ``outer_id`` 0; each exception it
    was raised from points at the previous entry through ``outer_id``.
    """
    details_list = []
    for position, exc in enumerate(_exception_chain(error), start=1):
        frames = _stack_frames(exc)
        details = contracts.ExceptionDetails()
        details.id = position
        details.outer_id = position - 1
        details.type_name = type(exc).__name__
        details.message = str(exc)
        details.has_full_stack = bool(frames)
        details.parsed_stack = frames
        details_list.append(details)
    return details_list


class ApplicationInsightsTelemetryClient(TelemetryClientPort):
    """Application Insights backed telemetry client."""

    def __init__(
        self,
        instrumentation_key: str,
        endpoint_url: str = "",
        channel_mode: str = "asynchronous",
        telemetry_channel: channel.TelemetryChannel | None = None,
        sdk_version: str | None = None,
    ):
        """Initialize the Application Insights client.

        Args:
            instrumentation_key: Key identifying the Application Insights resource.
            endpoint_url: Optional ingestion endpoint override.
            channel_mode: "asynchronous" or "synchronous" delivery.
            telemetry_channel: Prebuilt channel; overrides endpoint_url and
                channel_mode when given.
            sdk_version: Identifier written to the SDK version tag.

        Raises:
            ValueError: If the instrumentation key is empty or the channel
                mode is unknown.
        """
        if not instrumentation_key or not instrumentation_key.strip():
            raise ValueError("instrumentation_key must be a non-empty string")

        if telemetry_channel is None:
            telemetry_channel = build_channel(endpoint_url, channel_mode)

        self.client = TelemetryClient(instrumentation_key, telemetry_channel)
        self.sdk_version = sdk_version

    @property
    def instrumentation_key(self) -> str:
        """Instrumentation key every envelope is addressed to."""
        return self.client.context.instrumentation_key

    def submit_exception(self, record: ExceptionRecord) -> None:
        """Queue an exception record as ExceptionData."""
        data = contracts.ExceptionData()
        data.exceptions = _exception_details(record.error)
        if record.severity is not None:
            data.severity_level = record.severity.value
        if record.properties:
            data.properties = dict(record.properties)
        self._enqueue(data, record)

    def submit_trace(self, record: TraceRecord) -> None:
        """Queue a trace record as MessageData."""
        data = contracts.MessageData()
        data.message = record.message
        if record.severity is not None:
            data.severity_level = record.severity.value
        if record.properties:
            data.properties = dict(record.properties)
        self._enqueue(data, record)

    def flush(self) -> None:
        """Send everything queued on the channel."""
        self.client.flush()

    def _enqueue(self, data: Any, record: TelemetryRecord) -> None:
        """Wrap a data contract in an envelope and put it on the channel queue.

        The envelope is stamped with the record's own timestamp and user
        id, and client context properties are merged under the record's.
        Tags are built per call; the shared client context is only read.
        """
        context_properties = self.client.context.properties
        if context_properties:
            # record properties win over client-wide ones
            properties = dict(context_properties)
            properties.update(data.properties or {})
            data.properties = properties

        envelope = contracts.Envelope()
        envelope.name = data.ENVELOPE_TYPE_NAME
        envelope.time = _format_time(record.timestamp)
        envelope.ikey = self.instrumentation_key
        envelope.tags = self._build_tags(record)

        data_object = contracts.Data()
        data_object.base_type = data.DATA_TYPE_NAME
        data_object.base_data = data
        envelope.data = data_object

        self.client.channel.queue.put(envelope)

    def _build_tags(self, record: TelemetryRecord) -> dict[str, str]:
        tags: dict[str, str] = {}
        context = self.client.context
        for name in _CONTEXT_TAG_SOURCES:
            section = getattr(context, name, None)
            if section is not None:
                tags.update(section.write())

        if record.user_id is not None:
            user = contracts.User()
            user.id = record.user_id
            tags.update(user.write())

        if self.sdk_version:
            internal = contracts.Internal()
            internal.sdk_version = self.sdk_version
            tags.update(internal.write())

        return tags
