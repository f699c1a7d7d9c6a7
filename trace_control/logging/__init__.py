"""Trace flags for Trace Control."""

from .trace import TraceFlag

__all__ = ["TraceFlag"]
