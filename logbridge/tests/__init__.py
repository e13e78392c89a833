"""Test suite for the logbridge telemetry adapter.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - The logging handler against real loggers
   - The Application Insights client against an in-memory channel queue

3. fakes/: Port implementations for testing
   - In-memory implementations of TelemetryClientPort and LogEventPort
"""
