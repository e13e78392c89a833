"""Logging framework adapters that feed log events into the core.

Implementations support:
- Standard library logging (logging.Handler)
"""
