"""External adapters for the logbridge telemetry adapter.

This package contains all external dependencies (the logging framework,
the Application Insights SDK) and provides implementations of the core
port interfaces.

Adapter Organization:

- handler/: Logging handlers that turn framework records into LogEvents
- telemetry/: Telemetry clients that deliver records to a backend
"""
