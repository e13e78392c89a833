"""Unit tests for core domain logic.

These tests exercise the translation rules and the forwarder without
external dependencies. The telemetry client is replaced with the
in-memory fake from tests/fakes/.
"""
