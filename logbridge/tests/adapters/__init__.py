"""Tests for adapter implementations.

These tests exercise the logging handler against real loggers and the
Application Insights client against an in-memory channel queue, to
validate translation between core domain models and external formats.
"""
