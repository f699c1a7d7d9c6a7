"""Trace Control - named debug-trace flags toggled from an environment variable."""

from .__version__ import __version__
from .logging import TraceFlag
from .registry import RegistryState, TraceEntry, TraceRegistry, split_tokens

__all__ = [
    "__version__",
    "TraceFlag",
    "TraceEntry",
    "TraceRegistry",
    "RegistryState",
    "split_tokens",
]
