"""Telemetry adapters for submitting trace and exception records.

Implementations support:
- Application Insights (applicationinsights SDK)
"""
