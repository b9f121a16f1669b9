"""Telemetry helpers.

This package emits deterministic log events for normalizer setup and input rejection.
"""

from .logger import EventLogger, events

__all__ = ["EventLogger", "events"]
