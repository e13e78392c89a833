"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic and adapters
to be tested without external dependencies:

- FakeTelemetryClient: Captured telemetry records for assertion
- FakeLogEventPort: Captured log events for assertion
"""

from .forwarder import FakeLogEventPort
from .telemetry import FakeTelemetryClient

__all__ = [
    "FakeLogEventPort",
    "FakeTelemetryClient",
]
